from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import pytest

from invoicer.core.config import Settings


def invoice_payload(
    lines: List[Dict[str, Any]],
    currency: str = "AUD",
    date: str = "2020/08/05",
) -> Dict[str, Any]:
    return {"invoice": {"currency": currency, "date": date, "lines": lines}}


@pytest.fixture
def write_invoice(tmp_path: Path) -> Callable[..., Path]:
    """Write a JSON document to a temp file and return its path."""

    def _write(payload: Any, name: str = "invoice.json") -> Path:
        path = tmp_path / name
        if isinstance(payload, str):
            path.write_text(payload, encoding="utf-8")
        else:
            path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def two_line_invoice(write_invoice: Callable[..., Path]) -> Path:
    return write_invoice(
        invoice_payload(
            [
                {"description": "Intel Core i9", "currency": "USD", "amount": 100},
                {"description": "ASUS ROG Strix", "currency": "EUR", "amount": 50},
            ]
        )
    )


@pytest.fixture
def static_settings() -> Callable[..., Settings]:
    def _make(rates: Optional[Dict[str, float]] = None, **overrides: Any) -> Settings:
        fields: Dict[str, Any] = {
            "rate_provider": "static",
            "static_rates": rates or {},
            "rates_cache_ttl_seconds": 0,
            "json_logs": False,
        }
        fields.update(overrides)
        settings = Settings(**fields)
        settings.init_post_load()
        return settings

    return _make
