"""Caller identity and request throttling."""

from .bearer_tokens import BearerTokenVerifier
from .rate_limiter import FixedWindowRateLimiter, RateLimitRule

__all__ = ["BearerTokenVerifier", "FixedWindowRateLimiter", "RateLimitRule"]
