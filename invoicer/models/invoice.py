from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List


class LineItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: str
    currency: str
    amount: float = Field(..., ge=0, allow_inf_nan=False)

    @field_validator("currency")
    @classmethod
    def upper_currency(cls, v: str) -> str:
        # Codes are not checked against ISO 4217; the rate service rejects bad ones.
        return v.strip().upper()


class InvoiceDocument(BaseModel):
    """Parsed ``{"invoice": {...}}`` document."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    base_currency: str = Field(..., alias="currency")
    date: str
    lines: List[LineItem]

    @field_validator("base_currency")
    @classmethod
    def upper_base(cls, v: str) -> str:
        return v.strip().upper()


class LineTotal(BaseModel):
    description: str
    amount: float
