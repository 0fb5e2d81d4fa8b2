from __future__ import annotations

from typing import Mapping

from invoicer.core.errors import RateServiceError
from invoicer.models.rates import RateMap
from invoicer.services.money import round4

"""Reported rate -> multiplier conversion.

The service reports how many units of a quote currency buy 1 unit of the
base currency. Line amounts are in the quote currency, so the multiplier
into the base currency is the reciprocal, rounded to 4 dp (half-up).
"""


def invert_rates(reported: Mapping[str, float]) -> RateMap:
    rate_map: RateMap = {}
    for currency, value in reported.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise RateServiceError(f"invalid rate for {currency}: {value!r}")
        rate_map[currency.upper()] = round4(1 / value)
    return rate_map
