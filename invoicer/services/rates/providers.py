from __future__ import annotations

"""Concrete rate providers and factory.

'exchangeratesapi' talks to api.exchangeratesapi.io over HTTP; 'static' answers
from a fixed mapping (settings.static_rates) and never touches the network.
"""
import logging
from typing import Dict, Mapping, Optional

import httpx

from invoicer.core.config import Settings
from invoicer.core.errors import RateServiceError
from invoicer.models.rates import RateQuery
from invoicer.services.http_client import HttpError, get_json
from .base import RateProvider
from .cache_service import CachedRateProvider

logger = logging.getLogger("invoicer.rates")

DEFAULT_BASE_URL = "https://api.exchangeratesapi.io"


class StaticRateProvider(RateProvider):
    def __init__(self, rates: Mapping[str, float]):
        self._rates: Dict[str, float] = {k.upper(): v for k, v in rates.items()}

    async def fetch_rates(self, query: RateQuery) -> Dict[str, float]:  # type: ignore[override]
        # Only the requested symbols, like the real service.
        return {c: self._rates[c] for c in query.currencies if c in self._rates}


class ExchangeRatesApiProvider(RateProvider):
    """GET <base_url>/<date>?base=<base>&symbols=<c1,c2,...>

    Expects ``{"rates": {"USD": 0.65, ...}}``; error bodies carry ``error``.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        access_key: Optional[str] = None,
        timeout: float = 5.0,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self._base_url = base_url
        self._access_key = access_key
        self._timeout = timeout
        self._client = client

    def url_for(self, query: RateQuery) -> str:
        return query.url(self._base_url, self._access_key)

    async def fetch_rates(self, query: RateQuery) -> Dict[str, float]:  # type: ignore[override]
        try:
            data = await get_json(
                self.url_for(query), timeout=self._timeout, client=self._client
            )
        except HttpError as e:
            raise RateServiceError(str(e)) from e
        rates = data.get("rates")
        if not isinstance(rates, dict):
            raise RateServiceError("rate service response has no 'rates' object")
        logger.debug("fetched %d rates for %s on %s", len(rates), query.base_currency, query.date)
        return rates


_PROVIDER_REGISTRY = {
    "exchangeratesapi": lambda s: ExchangeRatesApiProvider(
        s.rates_api_base_url,
        access_key=s.rates_api_access_key,
        timeout=s.http_timeout_seconds,
    ),
    "static": lambda s: StaticRateProvider(s.static_rates),
}


def make_rate_provider(settings: Settings) -> RateProvider:
    """Build the configured provider, wrapped in the in-memory cache when enabled."""
    factory = _PROVIDER_REGISTRY.get(settings.rate_provider)
    if not factory:
        raise ValueError(f"Unknown rate provider kind '{settings.rate_provider}'")
    provider = factory(settings)
    if settings.rates_cache_ttl_seconds > 0:
        return CachedRateProvider(provider, ttl_seconds=settings.rates_cache_ttl_seconds)
    return provider
