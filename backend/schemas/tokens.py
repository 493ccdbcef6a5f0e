"""
Token Schemas
=============
Pydantic models for the token checkout API.
"""

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from backend.config import settings
from backend.core.pricing import Currency


class TokenPackageResponse(BaseModel):
    """Catalog entry for a token package."""

    ui_id: str
    api_id: str
    title: str
    tokens: int
    highlight: bool = False
    microcopy: str

    class Config:
        from_attributes = True


class TokenPackageListResponse(BaseModel):
    """All catalog packages in display order."""

    packages: list[TokenPackageResponse]


class TokenRate(BaseModel):
    """Exchange rate for a single currency."""

    currency: Currency
    tokens_per_unit: Decimal
    label: str


class TokenRatesResponse(BaseModel):
    """Token rates for every supported currency."""

    rates: list[TokenRate]


class QuickAmountsResponse(BaseModel):
    """Suggested purchase amounts per currency."""

    amounts: dict[Currency, list[int]]


class TokenQuoteRequest(BaseModel):
    """Custom amount to convert into tokens."""

    amount: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    currency: Currency

    @field_validator("amount")
    @classmethod
    def check_max_amount(cls, v: Decimal) -> Decimal:
        if v > settings.max_custom_amount:
            raise ValueError(f"amount must not exceed {settings.max_custom_amount}")
        return v


class TokenQuoteResponse(BaseModel):
    """Tokens granted for a custom amount."""

    amount: Decimal
    currency: Currency
    tokens: int
    exact_tokens: Decimal
    rounded: bool
