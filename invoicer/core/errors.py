"""Error taxonomy for the invoice pipeline.

Every failure aborts the current invoice. Unreadable files surface as the
built-in ``OSError``; everything else derives from ``InvoiceError``.
"""

from __future__ import annotations


class InvoiceError(Exception):
    pass


class MalformedInvoiceError(InvoiceError):
    def __init__(self, message: str = "Invalid input file"):
        super().__init__(message)


class EmptyQueryError(InvoiceError):
    def __init__(self, message: str = "missing query string"):
        super().__init__(message)


class RateServiceError(InvoiceError):
    """Rate service failure; the message is the service's (or transport's) own."""


class NoLineItemsError(InvoiceError):
    def __init__(self, message: str = "no lineItems found"):
        super().__init__(message)


class EmptyRateMapError(InvoiceError):
    def __init__(self, message: str = "empty exchangeRates object"):
        super().__init__(message)


class MissingRateError(InvoiceError):
    def __init__(self, currency: str):
        self.currency = currency
        super().__init__(f"no exchange rate for currency '{currency}'")


class NoLineTotalsError(InvoiceError):
    def __init__(self, message: str = "no lineTotal found"):
        super().__init__(message)


__all__ = [
    "InvoiceError",
    "MalformedInvoiceError",
    "EmptyQueryError",
    "RateServiceError",
    "NoLineItemsError",
    "EmptyRateMapError",
    "MissingRateError",
    "NoLineTotalsError",
]
