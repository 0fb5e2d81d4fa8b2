from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Dict, Tuple

from invoicer.models.rates import RateQuery
from .base import RateProvider

"""In-memory rate cache.

Purpose:
    Avoid asking the rate service twice for the same (date, base, symbols)
    within ``ttl_seconds``. Wraps any RateProvider and exposes the same
    ``fetch_rates`` API, so callers cannot tell the difference.

Design:
    - Keyed by RateQuery.cache_key(); dated rates for the same symbols are
      interchangeable.
    - Entries expire after the TTL; expired entries are purged on every fetch.
    - Failures are not cached; the next call asks the provider again.
    - Process-local, never persisted.
"""


@dataclass
class _CacheEntry:
    rates: Dict[str, float]
    fetched_at: datetime


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CachedRateProvider(RateProvider):
    def __init__(self, provider: RateProvider, ttl_seconds: int = 3600):
        if ttl_seconds <= 0:
            raise ValueError("cache ttl must be positive seconds")
        self._underlying = provider
        self._ttl = timedelta(seconds=ttl_seconds)
        self._cache: Dict[Tuple[str, str, str], _CacheEntry] = {}

    # Internal --------------------------------------------------
    def _is_entry_valid(self, entry: _CacheEntry) -> bool:
        return _utcnow() - entry.fetched_at < self._ttl

    def _purge_expired(self) -> None:
        expired = [k for k, v in self._cache.items() if not self._is_entry_valid(v)]
        for k in expired:
            self._cache.pop(k, None)

    # Public API -----------------------------------------------
    async def fetch_rates(self, query: RateQuery) -> Dict[str, float]:  # type: ignore[override]
        self._purge_expired()
        key = query.cache_key()
        entry = self._cache.get(key)
        if entry:
            return dict(entry.rates)
        rates = await self._underlying.fetch_rates(query)
        self._cache[key] = _CacheEntry(rates=dict(rates), fetched_at=_utcnow())
        return dict(rates)

    def clear(self) -> int:
        count = len(self._cache)
        self._cache.clear()
        return count

    def __len__(self) -> int:
        return len(self._cache)
