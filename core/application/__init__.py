"""Application layer - services, interfaces, and DTOs."""

from .interfaces import GatewayOrder, IPaymentGateway
from .services import (
    NotificationEmitter,
    NotificationInboxService,
    OrderLifecycleService,
    PaymentCoordinator,
    RefundService,
)

__all__ = [
    # Interfaces
    "GatewayOrder",
    "IPaymentGateway",
    # Services
    "NotificationEmitter",
    "NotificationInboxService",
    "OrderLifecycleService",
    "PaymentCoordinator",
    "RefundService",
]
