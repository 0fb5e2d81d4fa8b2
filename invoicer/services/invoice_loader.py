"""Invoice document loading.

Reads ``{"invoice": {"currency", "date", "lines": [...]}}`` from a JSON file.
Read failures propagate as ``OSError``; anything structurally wrong becomes
``MalformedInvoiceError``.
"""

from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Union

from pydantic import ValidationError

from invoicer.core.errors import MalformedInvoiceError
from invoicer.models.invoice import InvoiceDocument

logger = logging.getLogger("invoicer.loader")


def parse_invoice(data: Any) -> InvoiceDocument:
    if not isinstance(data, dict) or not isinstance(data.get("invoice"), dict):
        raise MalformedInvoiceError()
    try:
        return InvoiceDocument.model_validate(data["invoice"])
    except ValidationError as e:
        raise MalformedInvoiceError() from e


def load_invoice(path: Union[str, Path]) -> InvoiceDocument:
    raw = Path(path).read_bytes()
    try:
        data = json.loads(raw.decode("utf-8"))
    except ValueError as e:  # UnicodeDecodeError and JSONDecodeError
        raise MalformedInvoiceError(str(e)) from e
    document = parse_invoice(data)
    logger.debug(
        "loaded invoice %s: base=%s date=%s lines=%d",
        path,
        document.base_currency,
        document.date,
        len(document.lines),
    )
    return document
