"""
Order Domain Events.

Events that occur during the order lifecycle. OrderStatusChangedEvent is
the source of every OrderStatusHistory row.
"""
from dataclasses import dataclass
from typing import Optional

from .base import DomainEvent


@dataclass
class OrderStatusChangedEvent(DomainEvent):
    """
    Order status changed.

    Exactly one is recorded per status change; the application layer
    turns each into one appended history row.
    """

    order_id: str = ""
    previous_status: str = ""
    new_status: str = ""
    notes: Optional[str] = None

    def __post_init__(self):
        """Set aggregate_id to order_id."""
        if not self.aggregate_id and self.order_id:
            object.__setattr__(self, 'aggregate_id', self.order_id)
        super().__post_init__()


@dataclass
class OrderUpdatedEvent(DomainEvent):
    """
    Non-status order fields were updated (tracking number, notes).
    """

    order_id: str = ""
    updated_fields: dict = None

    def __post_init__(self):
        """Set aggregate_id to order_id."""
        if not self.aggregate_id and self.order_id:
            object.__setattr__(self, 'aggregate_id', self.order_id)
        if self.updated_fields is None:
            object.__setattr__(self, 'updated_fields', {})
        super().__post_init__()


@dataclass
class PaymentStatusChangedEvent(DomainEvent):
    """
    Order payment status changed (driven by payment reconciliation).
    """

    order_id: str = ""
    previous_status: str = ""
    new_status: str = ""

    def __post_init__(self):
        """Set aggregate_id to order_id."""
        if not self.aggregate_id and self.order_id:
            object.__setattr__(self, 'aggregate_id', self.order_id)
        super().__post_init__()
