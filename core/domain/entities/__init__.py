"""Domain entities."""

from .customer import Customer
from .notification import Notification, NotificationDraft
from .order import DEFAULT_CANCEL_REASON, Order, OrderItem, OrderStatusHistoryEntry
from .payment import Payment
from .refund import MIN_REFUND_REASON_LENGTH, Refund

__all__ = [
    "Customer",
    "DEFAULT_CANCEL_REASON",
    "MIN_REFUND_REASON_LENGTH",
    "Notification",
    "NotificationDraft",
    "Order",
    "OrderItem",
    "OrderStatusHistoryEntry",
    "Payment",
    "Refund",
]
