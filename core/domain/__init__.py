"""Domain layer - pure domain models and interfaces."""

from .entities import Notification, NotificationDraft, Order, OrderItem, Payment, Refund
from .enums import NotificationType, OrderStatus, PaymentStatus, RefundStatus, Role
from .repositories import (
    CustomerRepository,
    NotificationRepository,
    OrderRepository,
    PaymentRepository,
    RefundRepository,
)
from .value_objects import Caller, ExecutionID, Money, OrderNumber

__all__ = [
    "Caller",
    "CustomerRepository",
    "ExecutionID",
    "Money",
    "Notification",
    "NotificationDraft",
    "NotificationRepository",
    "NotificationType",
    "Order",
    "OrderItem",
    "OrderNumber",
    "OrderRepository",
    "OrderStatus",
    "Payment",
    "PaymentRepository",
    "PaymentStatus",
    "Refund",
    "RefundRepository",
    "RefundStatus",
    "Role",
]
