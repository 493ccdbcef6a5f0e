"""
Token Pricing Engine
====================
Conversion between currency amounts and platform tokens, plus the static
token package catalog.

Token rates: 100 tokens = €1.00 / £0.87 / $1.35
"""

import math
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from fractions import Fraction
from types import MappingProxyType
from typing import Literal, Mapping, Optional, Union

import structlog

logger = structlog.get_logger()

Number = Union[int, float, Decimal, Fraction]

ApiPackageId = Literal["STARTER", "POPULAR", "PRO", "ENTERPRISE"]
UiPackId = Literal["starter", "momentum", "elite"]

TOKEN_ROUNDING_STEP = 10


class Currency(str, Enum):
    """Supported purchase currencies."""

    EUR = "EUR"
    GBP = "GBP"
    USD = "USD"


# Tokens per one unit of currency. Kept as exact fractions so that the
# floor-to-10 step is never pushed across a boundary by float error.
TOKEN_RATES: Mapping[Currency, Fraction] = MappingProxyType({
    Currency.EUR: Fraction(100),                     # 100 tokens per €1
    Currency.GBP: Fraction(100) / Fraction("0.87"),  # ≈ 114.94 tokens per £1
    Currency.USD: Fraction(100) / Fraction("1.35"),  # ≈ 74.07 tokens per $1
})

CURRENCY_SYMBOLS: Mapping[Currency, str] = MappingProxyType({
    Currency.EUR: "€",
    Currency.GBP: "£",
    Currency.USD: "$",
})


@dataclass(frozen=True)
class TokenPackage:
    """One-time token package offered at catalog pricing."""

    ui_id: UiPackId
    api_id: ApiPackageId
    title: str
    tokens: int
    microcopy: str
    highlight: bool = False


TOKEN_PACKS: tuple[TokenPackage, ...] = (
    TokenPackage(
        ui_id="starter",
        api_id="STARTER",
        title="Starter Spark",
        tokens=10_000,
        microcopy="For a quick start",
    ),
    TokenPackage(
        ui_id="momentum",
        api_id="POPULAR",
        title="Momentum Pack",
        tokens=20_000,
        highlight=True,
        microcopy="Best value for consistency",
    ),
    TokenPackage(
        ui_id="elite",
        api_id="PRO",
        title="Elite Performance",
        tokens=30_000,
        microcopy="Built for long-term progress",
    ),
)

# Quick amount chips, ascending, currency-adaptive
QUICK_AMOUNTS: Mapping[Currency, tuple[int, int, int]] = MappingProxyType({
    Currency.EUR: (50, 100, 200),
    Currency.GBP: (45, 90, 180),
    Currency.USD: (70, 140, 280),
})

# Billed as a custom quote, never through the catalog
ENTERPRISE_API_ID = "ENTERPRISE"


def _to_fraction(amount: Number) -> Optional[Fraction]:
    """
    Convert an amount to an exact fraction.

    Floats go through their shortest decimal repr so that 0.87 means 87/100
    rather than the nearest binary double. Returns None for NaN/inf.
    """
    if isinstance(amount, (int, Fraction)):
        return Fraction(amount)
    if isinstance(amount, float):
        if not math.isfinite(amount):
            return None
        return Fraction(Decimal(repr(amount)))
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(amount)
    except (InvalidOperation, TypeError, ValueError):
        return None
    if not value.is_finite():
        return None
    return Fraction(value)


def get_token_rate(currency: Union[Currency, str]) -> Fraction:
    """Tokens granted per one unit of the given currency."""
    return TOKEN_RATES[Currency(currency)]


def calculate_exact_tokens(amount: Number, currency: Union[Currency, str]) -> Fraction:
    """
    Unrounded token count for an amount.

    Zero, negative and non-finite amounts yield zero.
    """
    rate = get_token_rate(currency)
    value = _to_fraction(amount)
    if value is None or value <= 0:
        return Fraction(0)
    return value * rate


def convert_amount_to_tokens(amount: Number, currency: Union[Currency, str]) -> int:
    """
    Calculate tokens from a currency amount.

    The result is always rounded down to the nearest 10 tokens, so a buyer
    never receives more tokens than the amount paid for.

    Args:
        amount: Amount in currency units
        currency: Currency code

    Returns:
        Tokens, a non-negative multiple of 10
    """
    exact = calculate_exact_tokens(amount, currency)
    if exact <= 0:
        return 0
    return math.floor(exact / TOKEN_ROUNDING_STEP) * TOKEN_ROUNDING_STEP


def was_amount_rounded(amount: Number, currency: Union[Currency, str]) -> bool:
    """Check whether convert_amount_to_tokens discarded a remainder."""
    exact = calculate_exact_tokens(amount, currency)
    if exact <= 0:
        return False
    return exact != convert_amount_to_tokens(amount, currency)


def lookup_package_by_external_id(ui_id: str) -> Optional[TokenPackage]:
    """Find a package by its user-facing identifier."""
    for package in TOKEN_PACKS:
        if package.ui_id == ui_id:
            return package
    return None


def lookup_package_by_billing_id(api_id: str) -> Optional[TokenPackage]:
    """
    Find a package by its billing identifier.

    ENTERPRISE has no catalog entry and always yields None.
    """
    if api_id == ENTERPRISE_API_ID:
        logger.debug("Enterprise tier requested, no catalog package", api_id=api_id)
        return None
    for package in TOKEN_PACKS:
        if package.api_id == api_id:
            return package
    return None


def get_quick_amounts(currency: Union[Currency, str]) -> tuple[int, int, int]:
    """Suggested purchase amounts for a currency."""
    return QUICK_AMOUNTS[Currency(currency)]


def format_rate_label(currency: Union[Currency, str]) -> str:
    """Human readable rate, e.g. '100 tokens = £0.87'."""
    currency = Currency(currency)
    price = Fraction(100) / TOKEN_RATES[currency]
    price_decimal = Decimal(price.numerator) / Decimal(price.denominator)
    return f"100 tokens = {CURRENCY_SYMBOLS[currency]}{price_decimal.quantize(Decimal('0.01'))}"
