"""Domain enums."""

from .order_status import (
    FORWARD_TRANSITIONS,
    NotificationType,
    OrderStatus,
    PaymentStatus,
    RefundStatus,
    Role,
)

__all__ = [
    "FORWARD_TRANSITIONS",
    "NotificationType",
    "OrderStatus",
    "PaymentStatus",
    "RefundStatus",
    "Role",
]
