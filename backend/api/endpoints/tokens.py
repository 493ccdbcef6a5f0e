"""
Token Endpoints
===============
API endpoints for token packages, rates and custom amount quotes.
"""

from typing import Optional

import structlog
from fastapi import APIRouter, HTTPException, status

from backend.core.pricing import Currency
from backend.schemas.tokens import (
    QuickAmountsResponse,
    TokenPackageListResponse,
    TokenPackageResponse,
    TokenQuoteRequest,
    TokenQuoteResponse,
    TokenRatesResponse,
)
from backend.services.tokens import TokenService

router = APIRouter()
logger = structlog.get_logger()

service = TokenService()


@router.get(
    "/packages",
    response_model=TokenPackageListResponse,
    summary="List token packages",
)
async def list_packages() -> TokenPackageListResponse:
    """Catalog packages in display order: starter, momentum, elite."""
    return service.list_packages()


@router.get(
    "/packages/billing/{api_id}",
    response_model=TokenPackageResponse,
    summary="Get package by billing id",
)
async def get_package_by_billing_id(api_id: str) -> TokenPackageResponse:
    """
    Look up a package by billing identifier.

    ENTERPRISE is quoted individually and is never in the catalog.
    """
    package = service.get_package_by_billing_id(api_id)
    if package is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No token package for billing id '{api_id}'",
        )
    return package


@router.get(
    "/packages/{ui_id}",
    response_model=TokenPackageResponse,
    summary="Get package",
)
async def get_package(ui_id: str) -> TokenPackageResponse:
    package = service.get_package(ui_id)
    if package is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Token package '{ui_id}' not found",
        )
    return package


@router.get(
    "/rates",
    response_model=TokenRatesResponse,
    summary="Get token rates",
    description="Tokens granted per unit of each supported currency",
)
async def get_rates() -> TokenRatesResponse:
    return service.get_rates()


@router.get(
    "/quick-amounts",
    response_model=QuickAmountsResponse,
    summary="Get suggested amounts",
)
async def get_quick_amounts(currency: Optional[Currency] = None) -> QuickAmountsResponse:
    return service.get_quick_amounts(currency)


@router.post(
    "/quote",
    response_model=TokenQuoteResponse,
    summary="Quote a custom amount",
    description="Convert a custom amount into tokens, rounded down to the nearest 10",
)
async def quote(request: TokenQuoteRequest) -> TokenQuoteResponse:
    return service.quote(request)
