"""Repository interfaces (persistence gateway)."""

from .notification_repository import NotificationRepository
from .order_repository import OrderRepository
from .payment_repository import PaymentRepository
from .refund_repository import CustomerRepository, RefundRepository

__all__ = [
    "CustomerRepository",
    "NotificationRepository",
    "OrderRepository",
    "PaymentRepository",
    "RefundRepository",
]
