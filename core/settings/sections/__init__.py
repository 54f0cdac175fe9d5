from core.settings.sections.auth import AuthSettings
from core.settings.sections.database import DatabaseSettings
from core.settings.sections.notifications import NotificationSettings
from core.settings.sections.rate_limit import RateLimitSettings
from core.settings.sections.razorpay import RazorpaySettings

__all__ = [
    "AuthSettings",
    "DatabaseSettings",
    "NotificationSettings",
    "RateLimitSettings",
    "RazorpaySettings",
]
