"""Application services."""

from .notification_emitter import NotificationEmitter
from .notification_inbox_service import NotificationInboxService
from .order_lifecycle_service import OrderLifecycleService, apply_transition
from .payment_coordinator import PaymentCoordinator
from .refund_service import RefundService

__all__ = [
    "NotificationEmitter",
    "NotificationInboxService",
    "OrderLifecycleService",
    "PaymentCoordinator",
    "RefundService",
    "apply_transition",
]
