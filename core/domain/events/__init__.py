"""Domain events collected by aggregates."""
from .base import DomainEvent
from .order_events import (
    OrderStatusChangedEvent,
    OrderUpdatedEvent,
    PaymentStatusChangedEvent,
)

__all__ = [
    "DomainEvent",
    "OrderStatusChangedEvent",
    "OrderUpdatedEvent",
    "PaymentStatusChangedEvent",
]
