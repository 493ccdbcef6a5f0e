"""
Contact Endpoints
=================
Public contact form with honeypot and per-IP rate limiting.
"""

from functools import lru_cache

import structlog
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from backend.config import settings
from backend.core.rate_limit import SlidingWindowRateLimiter
from backend.metrics import CONTACT_SUBMISSIONS
from backend.schemas.contact import ContactResponse, ContactSubmission
from backend.services.contact import (
    ContactDeliveryError,
    ContactService,
    ContactValidationError,
    is_honeypot_triggered,
    validate_submission,
)

router = APIRouter()
logger = structlog.get_logger()

UNKNOWN_CLIENT = "unknown"


@lru_cache
def get_rate_limiter() -> SlidingWindowRateLimiter:
    """Get the process-wide contact form rate limiter."""
    return SlidingWindowRateLimiter(
        window_seconds=settings.contact_rate_limit_window_seconds,
        max_requests=settings.contact_rate_limit_max_requests,
        max_keys=settings.contact_rate_limit_max_keys,
    )


def get_contact_service() -> ContactService:
    return ContactService()


def get_client_ip(request: Request) -> str:
    """First address of X-Forwarded-For, which proxies append to."""
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip() or UNKNOWN_CLIENT
    return UNKNOWN_CLIENT


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ContactResponse(ok=False, error=message).model_dump(exclude_none=True),
    )


@router.post(
    "",
    response_model=ContactResponse,
    response_model_exclude_none=True,
    summary="Submit contact form",
)
def submit_contact(
    submission: ContactSubmission,
    request: Request,
    contact_service: ContactService = Depends(get_contact_service),
    rate_limiter: SlidingWindowRateLimiter = Depends(get_rate_limiter),
):
    """
    Accept a contact form submission and forward it by email.

    Honeypot hits are answered with success and dropped. Runs in the
    threadpool since email delivery blocks on HTTP and retry backoff.
    """
    if is_honeypot_triggered(submission):
        CONTACT_SUBMISSIONS.labels(outcome="honeypot").inc()
        return ContactResponse(ok=True)

    ip = get_client_ip(request)
    if ip != UNKNOWN_CLIENT:
        result = rate_limiter.hit(ip)
        if not result.allowed:
            CONTACT_SUBMISSIONS.labels(outcome="rate_limited").inc()
            logger.warning("Contact form rate limited", ip=ip)
            return _error(
                status.HTTP_429_TOO_MANY_REQUESTS,
                "Too many requests. Please try again in 10 minutes.",
            )

    try:
        validate_submission(submission)
    except ContactValidationError as e:
        CONTACT_SUBMISSIONS.labels(outcome="invalid").inc()
        return _error(status.HTTP_400_BAD_REQUEST, str(e))

    try:
        message_id = contact_service.send(submission)
    except ContactDeliveryError:
        CONTACT_SUBMISSIONS.labels(outcome="failed").inc()
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Failed to send email. Please try again or email us directly.",
        )
    except Exception as e:
        CONTACT_SUBMISSIONS.labels(outcome="error").inc()
        logger.exception("Contact form error", error=str(e))
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "An error occurred. Please try again or email us directly.",
        )

    CONTACT_SUBMISSIONS.labels(outcome="sent" if contact_service.delivery_enabled else "logged").inc()
    return ContactResponse(ok=True, id=message_id)
