from typing import Optional

from pydantic import Field

from core.settings.base import StorefrontBaseSettings


class RazorpaySettings(StorefrontBaseSettings):
    """
    Razorpay payment gateway settings.
    Loaded from .env file with exact variable name matching.
    """

    key_id: str = Field(default="", alias="RAZORPAY_KEY_ID")
    key_secret: str = Field(default="", alias="RAZORPAY_KEY_SECRET")
    webhook_secret: Optional[str] = Field(default=None, alias="RAZORPAY_WEBHOOK_SECRET")
    currency: str = Field(default="INR", alias="RAZORPAY_CURRENCY")
    api_url: str = Field(default="https://api.razorpay.com/v1", alias="RAZORPAY_API_URL")

    # Outbound call policy
    timeout_seconds: float = Field(default=10.0, alias="RAZORPAY_TIMEOUT_SECONDS")
    max_attempts: int = Field(default=3, alias="RAZORPAY_MAX_ATTEMPTS")
    backoff_seconds: float = Field(default=0.5, alias="RAZORPAY_BACKOFF_SECONDS")

    @property
    def enabled(self) -> bool:
        return bool(self.key_id and self.key_secret)

    @property
    def effective_webhook_secret(self) -> str:
        return self.webhook_secret or self.key_secret
