from __future__ import annotations

from typing import List, Mapping, Sequence

from invoicer.core.errors import (
    EmptyRateMapError,
    MissingRateError,
    NoLineItemsError,
    NoLineTotalsError,
)
from invoicer.models.invoice import LineItem, LineTotal
from invoicer.services.money import round2


def calculate_line_totals(
    line_items: Sequence[LineItem], rate_map: Mapping[str, float]
) -> List[LineTotal]:
    """Convert every line into the base currency, keeping line order.

    Each amount is rounded to 2 dp on its own.
    """
    if len(line_items) == 0:
        raise NoLineItemsError()
    if len(rate_map) == 0:
        raise EmptyRateMapError()

    totals: List[LineTotal] = []
    for item in line_items:
        rate = rate_map.get(item.currency)
        if rate is None:
            raise MissingRateError(item.currency)
        totals.append(
            LineTotal(description=item.description, amount=round2(item.amount * rate))
        )
    return totals


def calculate_invoice_total(line_totals: Sequence[LineTotal]) -> float:
    """Round of the sum of already-rounded line amounts."""
    if len(line_totals) == 0:
        raise NoLineTotalsError()
    return round2(sum(lt.amount for lt in line_totals))
