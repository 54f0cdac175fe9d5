"""Fixtures for HTTP-level tests: app wired to the in-memory database."""

from typing import AsyncGenerator, Callable, Dict

import httpx
import pytest
import pytest_asyncio

from apps.api.main import create_app
from core.infrastructure.adapters.payments import MockPaymentGateway
from core.infrastructure.security import BearerTokenVerifier
from core.settings import AppSettings
from core.settings.sections import (
    AuthSettings,
    DatabaseSettings,
    NotificationSettings,
    RateLimitSettings,
    RazorpaySettings,
)


TEST_JWT_SECRET = "test-jwt-secret"


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        database=DatabaseSettings(database_url="sqlite+aiosqlite:///:memory:", create_tables=False),
        razorpay=RazorpaySettings(RAZORPAY_KEY_ID="", RAZORPAY_KEY_SECRET=""),
        auth=AuthSettings(JWT_SECRET=TEST_JWT_SECRET),
        rate_limit=RateLimitSettings(
            RATE_LIMIT_ENABLED=True,
            RATE_LIMIT_API_MAX_REQUESTS=100,
            RATE_LIMIT_STRICT_MAX_REQUESTS=3,
        ),
        notifications=NotificationSettings(NOTIFICATIONS_BEST_EFFORT=True),
    )


@pytest.fixture
def app(settings, database, gateway):
    """Application sharing the test database and mock gateway."""
    return create_app(settings=settings, database=database, gateway=gateway)


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[httpx.AsyncClient, None]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as http_client:
        yield http_client


@pytest.fixture
def auth() -> Callable[..., Dict[str, str]]:
    """Build an Authorization header for a user id (and role)."""
    verifier = BearerTokenVerifier(secret=TEST_JWT_SECRET)

    def headers(user_id: str = "u1", role: str = "CUSTOMER") -> Dict[str, str]:
        return {"Authorization": f"Bearer {verifier.issue(user_id, role=role)}"}

    return headers


@pytest.fixture
def bare_app(settings):
    """Application for tests that never reach the database."""
    return create_app(settings=settings, gateway=MockPaymentGateway())
