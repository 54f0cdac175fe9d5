"""SQLAlchemy repository implementations."""

from .notification_repository_impl import SqlAlchemyNotificationRepository
from .order_repository_impl import SqlAlchemyOrderRepository
from .payment_repository_impl import SqlAlchemyPaymentRepository
from .refund_repository_impl import SqlAlchemyCustomerRepository, SqlAlchemyRefundRepository

__all__ = [
    "SqlAlchemyCustomerRepository",
    "SqlAlchemyNotificationRepository",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyPaymentRepository",
    "SqlAlchemyRefundRepository",
]
