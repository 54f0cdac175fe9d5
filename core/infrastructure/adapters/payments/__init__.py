"""Payment gateway adapters."""

from typing import Optional

from core.application.interfaces import IPaymentGateway
from core.settings.sections import RazorpaySettings

from .mock_payment_gateway import MockPaymentGateway
from .razorpay_gateway import RazorpayGateway


def create_payment_gateway(settings: Optional[RazorpaySettings] = None) -> IPaymentGateway:
    """
    Create the payment gateway for the configured environment.

    Falls back to the mock gateway when no Razorpay key pair is configured.
    """
    settings = settings or RazorpaySettings()
    if settings.enabled:
        return RazorpayGateway(settings)
    return MockPaymentGateway(
        key_id=settings.key_id or "rzp_test_mock",
        key_secret=settings.key_secret or "mock_secret",
        webhook_secret=settings.webhook_secret,
    )


__all__ = ["MockPaymentGateway", "RazorpayGateway", "create_payment_gateway"]
