"""Database models."""

from .base import Base, new_id
from .notification_model import NotificationModel
from .order_model import OrderItemModel, OrderModel, OrderStatusHistoryModel, UserModel
from .payment_model import PaymentModel, RefundModel

__all__ = [
    "Base",
    "NotificationModel",
    "OrderItemModel",
    "OrderModel",
    "OrderStatusHistoryModel",
    "PaymentModel",
    "RefundModel",
    "UserModel",
    "new_id",
]
