"""Invoice total pipeline.

``InvoiceCalculator`` loads one invoice document on construction and then
runs: build query -> fetch rates -> convert lines -> sum -> print.

Every intermediate result is cached on the instance. Each step accepts its
inputs as optional arguments: a supplied value (anything but ``None``)
replaces the cached one, otherwise the cached value is used. This lets tests
and partial pipelines inject a query, rates, line totals or a total and skip
the steps before it (no network needed).
"""

from __future__ import annotations
import enum
import logging
import sys
from pathlib import Path
from typing import List, Mapping, Optional, Sequence, TextIO, Union

from invoicer.core.config import Settings, get_settings
from invoicer.core.errors import EmptyQueryError
from invoicer.models.invoice import InvoiceDocument, LineItem, LineTotal
from invoicer.models.rates import RateMap, RateQuery
from invoicer.services.invoice_loader import load_invoice
from invoicer.services.query import build_rate_query
from invoicer.services.rates.base import RateProvider
from invoicer.services.rates.conversion import invert_rates
from invoicer.services.rates.providers import make_rate_provider
from invoicer.services import totals

logger = logging.getLogger("invoicer.calculator")


class PipelineStage(enum.IntEnum):
    LOADED = 1
    QUERIED = 2
    RATES_RESOLVED = 3
    LINES_CONVERTED = 4
    TOTALED = 5


class InvoiceCalculator:
    def __init__(
        self,
        path: Union[str, Path],
        *,
        rate_provider: Optional[RateProvider] = None,
        settings: Optional[Settings] = None,
    ):
        self.path = Path(path)
        self._settings = settings or get_settings()
        self._rate_provider = rate_provider
        self.document: InvoiceDocument
        self.base_currency: str = ""
        self.date: str = ""
        self.line_items: List[LineItem] = []
        self.query: Optional[RateQuery] = None
        self.exchange_rates: RateMap = {}
        self.line_totals: List[LineTotal] = []
        self.invoice_total: Optional[float] = None
        self.load_data()

    @property
    def rate_provider(self) -> RateProvider:
        if self._rate_provider is None:
            self._rate_provider = make_rate_provider(self._settings)
        return self._rate_provider

    @property
    def stage(self) -> PipelineStage:
        if self.invoice_total is not None:
            return PipelineStage.TOTALED
        if self.line_totals:
            return PipelineStage.LINES_CONVERTED
        if self.exchange_rates:
            return PipelineStage.RATES_RESOLVED
        if self.query is not None:
            return PipelineStage.QUERIED
        return PipelineStage.LOADED

    def load_data(self) -> InvoiceDocument:
        """(Re)load the backing file; drops every derived result."""
        self.document = load_invoice(self.path)
        self.base_currency = self.document.base_currency
        self.date = self.document.date
        self.line_items = list(self.document.lines)
        self.query = None
        self.exchange_rates = {}
        self.line_totals = []
        self.invoice_total = None
        return self.document

    def generate_query(self) -> RateQuery:
        self.query = build_rate_query(self.base_currency, self.date, self.line_items)
        logger.debug("rate query built: %s", self.query.symbols)
        return self.query

    async def fetch_exchange_rates(self, query: Optional[RateQuery] = None) -> RateMap:
        """Resolve multipliers for the query's currencies.

        Raises EmptyQueryError when no query is given and none was built;
        RateServiceError when the provider fails.
        """
        if query is not None:
            self.query = query
        if self.query is None:
            raise EmptyQueryError()
        reported = await self.rate_provider.fetch_rates(self.query)
        self.exchange_rates = invert_rates(reported)
        logger.debug("resolved %d exchange rates", len(self.exchange_rates))
        return self.exchange_rates

    def calculate_line_totals(
        self,
        line_items: Optional[Sequence[LineItem]] = None,
        exchange_rates: Optional[Mapping[str, float]] = None,
    ) -> List[LineTotal]:
        if line_items is not None:
            self.line_items = list(line_items)
        if exchange_rates is not None:
            self.exchange_rates = dict(exchange_rates)
        self.line_totals = totals.calculate_line_totals(self.line_items, self.exchange_rates)
        return self.line_totals

    def calculate_invoice_total(
        self, line_totals: Optional[Sequence[LineTotal]] = None
    ) -> float:
        if line_totals is not None:
            self.line_totals = list(line_totals)
        self.invoice_total = totals.calculate_invoice_total(self.line_totals)
        logger.debug("invoice total %.2f %s", self.invoice_total, self.base_currency)
        return self.invoice_total

    async def print_invoice_total(
        self, invoice_total: Optional[float] = None, out: Optional[TextIO] = None
    ) -> float:
        """Emit the invoice total, running the whole pipeline if none is known."""
        if invoice_total is not None:
            self.invoice_total = invoice_total
        if self.invoice_total is None:
            self.generate_query()
            await self.fetch_exchange_rates()
            self.calculate_line_totals()
            self.calculate_invoice_total()
        print(f"{self.invoice_total:.2f}", file=out or sys.stdout)
        return self.invoice_total
