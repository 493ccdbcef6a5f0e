"""
Token Service
=============
Builds checkout responses from the pricing engine.
"""

from decimal import Decimal
from fractions import Fraction
from typing import Optional

import structlog

from backend.core.pricing import (
    QUICK_AMOUNTS,
    TOKEN_PACKS,
    Currency,
    calculate_exact_tokens,
    convert_amount_to_tokens,
    format_rate_label,
    get_token_rate,
    lookup_package_by_billing_id,
    lookup_package_by_external_id,
    was_amount_rounded,
)
from backend.metrics import TOKEN_QUOTES
from backend.schemas.tokens import (
    QuickAmountsResponse,
    TokenPackageListResponse,
    TokenPackageResponse,
    TokenQuoteRequest,
    TokenQuoteResponse,
    TokenRate,
    TokenRatesResponse,
)

logger = structlog.get_logger()

DISPLAY_PRECISION = Decimal("0.01")


def _fraction_to_decimal(value: Fraction) -> Decimal:
    return (Decimal(value.numerator) / Decimal(value.denominator)).quantize(DISPLAY_PRECISION)


class TokenService:
    """Read-only access to token pricing for the checkout API."""

    def list_packages(self) -> TokenPackageListResponse:
        return TokenPackageListResponse(
            packages=[TokenPackageResponse.model_validate(p) for p in TOKEN_PACKS],
        )

    def get_package(self, ui_id: str) -> Optional[TokenPackageResponse]:
        package = lookup_package_by_external_id(ui_id)
        if package is None:
            return None
        return TokenPackageResponse.model_validate(package)

    def get_package_by_billing_id(self, api_id: str) -> Optional[TokenPackageResponse]:
        package = lookup_package_by_billing_id(api_id)
        if package is None:
            return None
        return TokenPackageResponse.model_validate(package)

    def get_rates(self) -> TokenRatesResponse:
        return TokenRatesResponse(
            rates=[
                TokenRate(
                    currency=currency,
                    tokens_per_unit=_fraction_to_decimal(get_token_rate(currency)),
                    label=format_rate_label(currency),
                )
                for currency in Currency
            ],
        )

    def get_quick_amounts(self, currency: Optional[Currency] = None) -> QuickAmountsResponse:
        currencies = [currency] if currency else list(Currency)
        return QuickAmountsResponse(
            amounts={c: list(QUICK_AMOUNTS[c]) for c in currencies},
        )

    def quote(self, request: TokenQuoteRequest) -> TokenQuoteResponse:
        """
        Convert a custom amount into tokens.

        Tokens are rounded down to the nearest 10; the unrounded figure is
        returned alongside for display.
        """
        tokens = convert_amount_to_tokens(request.amount, request.currency)
        rounded = was_amount_rounded(request.amount, request.currency)
        exact = calculate_exact_tokens(request.amount, request.currency)

        TOKEN_QUOTES.labels(currency=request.currency.value, rounded=str(rounded).lower()).inc()
        logger.info(
            "Token quote",
            amount=str(request.amount),
            currency=request.currency.value,
            tokens=tokens,
            rounded=rounded,
        )

        return TokenQuoteResponse(
            amount=request.amount,
            currency=request.currency,
            tokens=tokens,
            exact_tokens=_fraction_to_decimal(exact),
            rounded=rounded,
        )
