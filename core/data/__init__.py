"""Data layer - infrastructure persistence and mapping."""

from .models import Base
from .repositories import (
    SqlAlchemyCustomerRepository,
    SqlAlchemyNotificationRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyPaymentRepository,
    SqlAlchemyRefundRepository,
)
from .uow import UnitOfWork, create_uow

__all__ = [
    "Base",
    "create_uow",
    "SqlAlchemyCustomerRepository",
    "SqlAlchemyNotificationRepository",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyPaymentRepository",
    "SqlAlchemyRefundRepository",
    "UnitOfWork",
]
