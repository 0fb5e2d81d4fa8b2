from __future__ import annotations

"""Rate provider abstraction.

A provider answers one ``RateQuery`` with the rates exactly as the service
reports them: units of each quote currency per 1 unit of the base currency.
Inverting them into multipliers is done by ``conversion.invert_rates``.
"""
from abc import ABC, abstractmethod
from typing import Dict

from invoicer.models.rates import RateQuery


class RateProvider(ABC):
    @abstractmethod
    async def fetch_rates(self, query: RateQuery) -> Dict[str, float]:
        """Return quote-currency units per 1 base unit, keyed by currency."""
        raise NotImplementedError
