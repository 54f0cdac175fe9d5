from pydantic import Field

from core.settings.base import StorefrontBaseSettings


class RateLimitSettings(StorefrontBaseSettings):
    """
    Request budgets per caller.

    `api` applies to ordinary reads, `strict` to payment creation and cancellation.
    """

    enabled: bool = Field(default=True, alias="RATE_LIMIT_ENABLED")
    api_window_seconds: int = Field(default=60, alias="RATE_LIMIT_API_WINDOW_SECONDS")
    api_max_requests: int = Field(default=60, alias="RATE_LIMIT_API_MAX_REQUESTS")
    strict_window_seconds: int = Field(default=60, alias="RATE_LIMIT_STRICT_WINDOW_SECONDS")
    strict_max_requests: int = Field(default=5, alias="RATE_LIMIT_STRICT_MAX_REQUESTS")
