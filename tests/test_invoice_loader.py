from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from invoicer.core.errors import MalformedInvoiceError
from invoicer.services.invoice_loader import load_invoice, parse_invoice

from conftest import invoice_payload


def test_load_valid_document(write_invoice) -> None:
    path = write_invoice(
        invoice_payload(
            [
                {"description": "A", "currency": "usd", "amount": 100},
                {"description": "B", "currency": "EUR", "amount": 12.5},
            ]
        )
    )

    doc = load_invoice(path)

    assert doc.base_currency == "AUD"
    assert doc.date == "2020/08/05"
    assert [line.description for line in doc.lines] == ["A", "B"]
    assert doc.lines[0].currency == "USD"
    assert doc.lines[1].amount == 12.5


def test_missing_file_raises_oserror(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        load_invoice(tmp_path / "nope.json")


def test_missing_invoice_field(write_invoice) -> None:
    path = write_invoice({"bill": {"currency": "AUD"}})

    with pytest.raises(MalformedInvoiceError, match="Invalid input file"):
        load_invoice(path)


@pytest.mark.parametrize("missing", ["currency", "date", "lines"])
def test_missing_required_invoice_keys(write_invoice, missing: str) -> None:
    payload = invoice_payload([{"description": "A", "currency": "USD", "amount": 1}])
    del payload["invoice"][missing]

    with pytest.raises(MalformedInvoiceError, match="Invalid input file"):
        load_invoice(write_invoice(payload))


def test_invalid_json_is_malformed(write_invoice) -> None:
    path = write_invoice("{ not json")

    with pytest.raises(MalformedInvoiceError):
        load_invoice(path)


def test_negative_amount_rejected() -> None:
    payload = invoice_payload([{"description": "A", "currency": "USD", "amount": -1}])

    with pytest.raises(MalformedInvoiceError):
        parse_invoice(payload)


def test_document_is_immutable() -> None:
    doc = parse_invoice(invoice_payload([]))

    with pytest.raises(ValidationError):
        doc.date = "2021/01/01"  # type: ignore[misc]


@pytest.mark.parametrize(
    "raw",
    [
        b"\xff\xfe",
        b'{"invoice": {"currency": "AUD\xff", "date": "2020/08/05", "lines": []}}',
    ],
)
def test_non_utf8_file_is_malformed(tmp_path: Path, raw: bytes) -> None:
    path = tmp_path / "invoice.json"
    path.write_bytes(raw)

    with pytest.raises(MalformedInvoiceError, match="utf-8"):
        load_invoice(path)


@pytest.mark.parametrize("literal", ["Infinity", "NaN"])
def test_non_finite_amount_rejected(write_invoice, literal: str) -> None:
    path = write_invoice(
        '{"invoice": {"currency": "AUD", "date": "2020/08/05", '
        f'"lines": [{{"description": "A", "currency": "USD", "amount": {literal}}}]}}}}'
    )

    with pytest.raises(MalformedInvoiceError, match="Invalid input file"):
        load_invoice(path)
