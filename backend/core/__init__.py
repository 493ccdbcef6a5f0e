"""
Core Business Logic
====================
Token pricing, package catalog and request rate limiting.
"""

from backend.core.pricing import (
    QUICK_AMOUNTS,
    TOKEN_PACKS,
    TOKEN_RATES,
    Currency,
    TokenPackage,
    convert_amount_to_tokens,
    lookup_package_by_billing_id,
    lookup_package_by_external_id,
    was_amount_rounded,
)
from backend.core.rate_limit import RateLimitResult, SlidingWindowRateLimiter

__all__ = [
    "Currency",
    "TokenPackage",
    "TOKEN_RATES",
    "TOKEN_PACKS",
    "QUICK_AMOUNTS",
    "convert_amount_to_tokens",
    "was_amount_rounded",
    "lookup_package_by_external_id",
    "lookup_package_by_billing_id",
    "RateLimitResult",
    "SlidingWindowRateLimiter",
]
