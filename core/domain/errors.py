"""
Domain error taxonomy.

Errors are raised where a failure is detected and converted to an HTTP
response only at the API boundary (see apps/api/errors.py).

CRITICAL: This file must contain ZERO imports from fastapi.
"""
from typing import Optional


class OrderFlowError(Exception):
    """Base class for all failures of the order and payment flow."""

    default_message = "Order flow error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class Unauthorized(OrderFlowError):
    """No caller identity, or the presented credentials are invalid."""

    default_message = "Unauthorized"


class Forbidden(OrderFlowError):
    """Caller is authenticated but lacks the required role."""

    default_message = "Forbidden"


class NotFound(OrderFlowError):
    """
    Entity missing or not owned by the caller.

    Both cases share one error so that callers cannot probe for
    the existence of other users' orders.
    """

    default_message = "Not found"


class InvalidTransition(OrderFlowError):
    """Requested status change is not allowed from the current status."""

    default_message = "Invalid status transition"


class AlreadyPaid(OrderFlowError):
    """Payment intent requested for an order whose payment is completed."""

    default_message = "Order already paid"


class ValidationFailed(OrderFlowError):
    """Request data failed a business validation rule."""

    default_message = "Validation error"


class InvalidSignature(OrderFlowError):
    """Payment or webhook signature did not match."""

    default_message = "Invalid payment signature"


class RateLimited(OrderFlowError):
    """Caller exceeded the request budget of the current window."""

    default_message = "Too many requests. Please try again later."

    def __init__(self, message: Optional[str] = None, remaining: int = 0, reset_at: Optional[float] = None):
        super().__init__(message)
        self.remaining = remaining
        self.reset_at = reset_at


class UpstreamUnavailable(OrderFlowError):
    """Payment gateway (or another upstream) failed; the caller may retry."""

    default_message = "Payment gateway unavailable"


__all__ = [
    "OrderFlowError",
    "Unauthorized",
    "Forbidden",
    "NotFound",
    "InvalidTransition",
    "AlreadyPaid",
    "ValidationFailed",
    "InvalidSignature",
    "RateLimited",
    "UpstreamUnavailable",
]
