"""Pydantic domain models for the invoice pipeline."""

from .invoice import InvoiceDocument, LineItem, LineTotal
from .rates import RateMap, RateQuery

__all__ = [
    "InvoiceDocument",
    "LineItem",
    "LineTotal",
    "RateMap",
    "RateQuery",
]
