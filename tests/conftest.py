"""
Test Configuration
==================
Pytest fixtures for the billing backend tests.
"""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from backend.api.endpoints.contact import get_contact_service, get_rate_limiter
from backend.config import Settings
from backend.core.rate_limit import SlidingWindowRateLimiter
from backend.main import app
from backend.services.contact import ContactService


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def rate_limiter(clock: FakeClock) -> SlidingWindowRateLimiter:
    """Contact form limiter with production limits and a fake clock."""
    return SlidingWindowRateLimiter(
        window_seconds=600,
        max_requests=5,
        max_keys=1000,
        clock=clock,
    )


@pytest.fixture
def contact_service() -> ContactService:
    """Contact service with email delivery disabled."""
    return ContactService(config=Settings(resend_api_key=None))


@pytest.fixture
def client(
    contact_service: ContactService,
    rate_limiter: SlidingWindowRateLimiter,
) -> Generator[TestClient, None, None]:
    """Create test client with contact dependencies overridden."""
    app.dependency_overrides[get_contact_service] = lambda: contact_service
    app.dependency_overrides[get_rate_limiter] = lambda: rate_limiter

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def sample_contact() -> dict:
    """Valid contact form submission."""
    return {
        "name": "Jamie Rivers",
        "email": "jamie@example.com",
        "topic": "Billing",
        "message": "I bought the Momentum Pack but the tokens\nhave not arrived yet.",
        "companyWebsite": "",
    }
