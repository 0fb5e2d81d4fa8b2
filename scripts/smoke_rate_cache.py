"""Smoke script for the in-memory rate cache.

Demonstrates:
 1. First total for data/invoice.json triggers an underlying provider fetch.
 2. A second calculator sharing the cached provider reuses the same entry.
 3. Backdating the entry past its TTL forces a refresh.

Uses the static provider so it runs offline. NOTE: This is a lightweight
diagnostic and not a formal test.
"""

import asyncio
import io
from datetime import timedelta
from pprint import pprint

from invoicer.core.config import Settings
from invoicer.services.calculator import InvoiceCalculator
from invoicer.services.rates.providers import make_rate_provider


def run():
    settings = Settings(
        rate_provider="static",
        static_rates={"USD": 0.9407, "AUD": 1.0693},
        rates_cache_ttl_seconds=60,
    )
    settings.init_post_load()
    provider = make_rate_provider(settings)
    out = {"initial": {}, "second": {}, "forced_refresh": {}}

    def snapshot(label: str) -> None:
        calc = InvoiceCalculator(settings.invoice_path, rate_provider=provider, settings=settings)
        total = asyncio.run(calc.print_invoice_total(out=io.StringIO()))
        entry = next(iter(provider._cache.values()))  # type: ignore[attr-defined]
        out[label] = {"total": total, "fetched_at": entry.fetched_at.isoformat()}

    snapshot("initial")
    snapshot("second")

    for entry in provider._cache.values():  # type: ignore[attr-defined]
        entry.fetched_at -= timedelta(seconds=provider._ttl.total_seconds() + 5)  # type: ignore[attr-defined]

    snapshot("forced_refresh")
    pprint(out)


if __name__ == "__main__":
    run()
