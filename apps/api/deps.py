"""
FastAPI Dependencies.

Provides dependency injection for services, the caller identity and the
rate limiter. Everything here reads from `app.state`, which `create_app`
fills once per process.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from dotenv import load_dotenv
from fastapi import Depends, Request

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from core.application.services import (
    NotificationInboxService,
    OrderLifecycleService,
    PaymentCoordinator,
    RefundService,
)
from core.domain.errors import Unauthorized
from core.domain.value_objects import Caller
from core.infrastructure.security import BearerTokenVerifier, FixedWindowRateLimiter

logger = logging.getLogger(__name__)


# =============================================================================
# SERVICES
# =============================================================================

def get_order_service(request: Request) -> OrderLifecycleService:
    return request.app.state.order_service


def get_payment_coordinator(request: Request) -> PaymentCoordinator:
    return request.app.state.payment_coordinator


def get_refund_service(request: Request) -> RefundService:
    return request.app.state.refund_service


def get_inbox_service(request: Request) -> NotificationInboxService:
    return request.app.state.inbox_service


def get_rate_limiter(request: Request) -> FixedWindowRateLimiter:
    return request.app.state.rate_limiter


def get_token_verifier(request: Request) -> BearerTokenVerifier:
    return request.app.state.token_verifier


# =============================================================================
# CALLER IDENTITY
# =============================================================================

def get_optional_caller(
    request: Request,
    verifier: BearerTokenVerifier = Depends(get_token_verifier),
) -> Optional[Caller]:
    """Resolve the caller from `Authorization: Bearer <token>`, if any."""
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return verifier.verify(token.strip())


def get_current_caller(caller: Optional[Caller] = Depends(get_optional_caller)) -> Caller:
    """Authenticated caller, or Unauthorized."""
    if caller is None:
        raise Unauthorized("Unauthorized")
    return caller


# =============================================================================
# RATE LIMITING
# =============================================================================

def rate_limited(bucket: str = "api") -> Callable[..., Caller]:
    """
    Dependency factory: authenticated caller, counted against `bucket`.

    Usage:
        caller: Caller = Depends(rate_limited("strict"))
    """

    def dependency(
        caller: Caller = Depends(get_current_caller),
        limiter: FixedWindowRateLimiter = Depends(get_rate_limiter),
    ) -> Caller:
        limiter.check(f"user:{caller.user_id}", bucket)
        return caller

    return dependency
