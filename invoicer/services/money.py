"""Money / rounding helpers.

Centralized so rate inversion, line conversion and the invoice total use
identical rounding semantics (half away from zero, not banker's rounding).
"""

from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP


def round_half_up(value: float, precision: int) -> float:
    quantum = Decimal(1).scaleb(-precision)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round2(value: float) -> float:
    return round_half_up(value, 2)


def round4(value: float) -> float:
    return round_half_up(value, 4)
