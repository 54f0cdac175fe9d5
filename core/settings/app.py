from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from core.settings.sections import (
    AuthSettings,
    DatabaseSettings,
    NotificationSettings,
    RateLimitSettings,
    RazorpaySettings,
)


class AppSettings(BaseModel):
    """
    Application settings aggregator.

    Each section loads its own environment variables; this model only
    groups them so the rest of the app can take one object.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="ignore")

    database: DatabaseSettings
    razorpay: RazorpaySettings
    auth: AuthSettings
    rate_limit: RateLimitSettings
    notifications: NotificationSettings


@lru_cache()
def get_app_settings() -> AppSettings:
    """Return cached global settings for the entire app."""
    return AppSettings(
        database=DatabaseSettings(),
        razorpay=RazorpaySettings(),
        auth=AuthSettings(),
        rate_limit=RateLimitSettings(),
        notifications=NotificationSettings(),
    )
