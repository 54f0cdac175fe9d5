"""
Order Lifecycle Enums.

Status values for orders, payments, refunds and notifications.
"""
from enum import Enum
from typing import Dict, FrozenSet


class OrderStatus(str, Enum):
    """Order lifecycle status values."""

    PENDING = "PENDING"
    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"


class PaymentStatus(str, Enum):
    """Payment status values (shared by Order.payment_status and Payment.status)."""

    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"


class RefundStatus(str, Enum):
    """Refund request status values."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    COMPLETED = "COMPLETED"


class NotificationType(str, Enum):
    """Notification categories shown in the customer inbox."""

    ORDER = "ORDER"
    PAYMENT = "PAYMENT"
    SYSTEM = "SYSTEM"


class Role(str, Enum):
    """Caller roles."""

    CUSTOMER = "CUSTOMER"
    ADMIN = "ADMIN"


# Forward path of the lifecycle; CANCELLED only from the first two states.
FORWARD_TRANSITIONS: Dict[OrderStatus, FrozenSet[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.PROCESSING, OrderStatus.CANCELLED}),
    OrderStatus.PROCESSING: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}
