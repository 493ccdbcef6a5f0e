"""
Pydantic Schemas
================
Request/Response models for API validation.
"""

from backend.schemas.contact import ContactResponse, ContactSubmission
from backend.schemas.tokens import (
    QuickAmountsResponse,
    TokenPackageListResponse,
    TokenPackageResponse,
    TokenQuoteRequest,
    TokenQuoteResponse,
    TokenRate,
    TokenRatesResponse,
)

__all__ = [
    "ContactSubmission",
    "ContactResponse",
    "TokenPackageResponse",
    "TokenPackageListResponse",
    "TokenRate",
    "TokenRatesResponse",
    "QuickAmountsResponse",
    "TokenQuoteRequest",
    "TokenQuoteResponse",
]
