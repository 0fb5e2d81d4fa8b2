from __future__ import annotations

from typing import Sequence

from invoicer.models.invoice import LineItem
from invoicer.models.rates import RateQuery


def build_rate_query(
    base_currency: str, date: str, line_items: Sequence[LineItem]
) -> RateQuery:
    """One symbol per line item, in line order, duplicates kept."""
    return RateQuery(
        date=date,
        base_currency=base_currency,
        currencies=[item.currency for item in line_items],
    )
