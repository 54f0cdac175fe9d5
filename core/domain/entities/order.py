"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from ..enums import FORWARD_TRANSITIONS, OrderStatus, PaymentStatus
from ..errors import InvalidTransition
from ..events import (
    DomainEvent,
    OrderStatusChangedEvent,
    OrderUpdatedEvent,
    PaymentStatusChangedEvent,
)
from ..value_objects import Money, OrderNumber, utc_now


DEFAULT_CANCEL_REASON = "No reason provided"


@dataclass
class OrderItem:
    """Individual line item within an order (product snapshot at checkout)."""
    product_id: str
    product_name: str
    quantity: int
    price: Money


@dataclass(frozen=True)
class OrderStatusHistoryEntry:
    """One immutable row of an order's status trail."""
    id: int
    order_id: str
    status: OrderStatus
    notes: Optional[str]
    created_at: datetime
    created_by: Optional[str] = None


@dataclass
class Order:
    """
    Order aggregate root.

    Owns the lifecycle state machine:

        PENDING -> PROCESSING -> SHIPPED -> DELIVERED
        PENDING | PROCESSING -> CANCELLED

    Every status change records exactly one OrderStatusChangedEvent,
    which the application layer persists as one history row.
    """
    id: str
    order_number: OrderNumber
    user_id: str
    total: Money
    status: OrderStatus = OrderStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.PENDING
    items: List[OrderItem] = field(default_factory=list)
    tracking_number: Optional[str] = None
    cancelled_at: Optional[datetime] = None
    cancel_reason: Optional[str] = None
    notes: Optional[str] = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    # Event collection
    _domain_events: List[DomainEvent] = field(default_factory=list, init=False, repr=False)

    def is_owned_by(self, user_id: str) -> bool:
        return self.user_id == user_id

    def can_transition_to(self, new_status: OrderStatus) -> bool:
        """Whether `new_status` is a forward step of the lifecycle from here."""
        return new_status in FORWARD_TRANSITIONS[self.status]

    def can_be_cancelled(self) -> bool:
        return self.can_transition_to(OrderStatus.CANCELLED)

    def cancel(self, reason: Optional[str] = None, actor_id: Optional[str] = None) -> None:
        """
        Business rule: customer cancellation.

        Only PENDING and PROCESSING orders can be cancelled.

        Raises:
            InvalidTransition: If the order is already shipped, delivered or cancelled
        """
        if not self.can_be_cancelled():
            raise InvalidTransition(
                "Order cannot be cancelled. It has already been shipped or delivered."
            )

        reason_text = reason or DEFAULT_CANCEL_REASON
        self.cancelled_at = utc_now()
        self.cancel_reason = reason_text
        self._change_status(
            OrderStatus.CANCELLED,
            notes=f"Cancelled by customer. Reason: {reason_text}",
            actor_id=actor_id,
        )

    def override(
        self,
        status: Optional[OrderStatus] = None,
        tracking_number: Optional[str] = None,
        notes: Optional[str] = None,
        actor_id: Optional[str] = None,
    ) -> bool:
        """
        Administrative override: apply only the supplied fields.

        No forward-path check is made. A history entry is recorded only
        when the supplied status differs from the current one.

        Returns:
            True if the status changed
        """
        updated_fields = {}
        if tracking_number:
            self.tracking_number = tracking_number
            updated_fields["tracking_number"] = tracking_number
        if notes is not None:
            self.notes = notes
            updated_fields["notes"] = notes

        if updated_fields:
            self.updated_at = utc_now()
            self._domain_events.append(
                OrderUpdatedEvent(order_id=self.id, updated_fields=updated_fields, actor_id=actor_id)
            )

        if status is None or status == self.status:
            return False

        self._change_status(
            status,
            notes=notes or f"Status updated to {status.value}",
            actor_id=actor_id,
        )
        return True

    def record_payment_captured(self) -> bool:
        """
        Mark payment completed; a PENDING order moves on to PROCESSING.

        Returns:
            True if the order status changed
        """
        self._change_payment_status(PaymentStatus.COMPLETED)
        if not self.can_transition_to(OrderStatus.PROCESSING):
            return False
        self._change_status(OrderStatus.PROCESSING, notes="Payment received")
        return True

    def record_payment_failed(self) -> None:
        """Mark payment failed. Order status is left untouched."""
        self._change_payment_status(PaymentStatus.FAILED)

    def approve_refund(self, notes: Optional[str] = None, actor_id: Optional[str] = None) -> bool:
        """
        Approved refund: payment is refunded and the order is cancelled.

        Like the administrative override this skips the forward-path check,
        so delivered orders can be refunded too.

        Returns:
            True if the order status changed
        """
        self._change_payment_status(PaymentStatus.REFUNDED)
        if self.status == OrderStatus.CANCELLED:
            return False

        self.cancelled_at = utc_now()
        self._change_status(
            OrderStatus.CANCELLED,
            notes=notes or "Refund approved",
            actor_id=actor_id,
        )
        return True

    # =========================================================================
    # EVENT COLLECTION
    # =========================================================================

    def pull_domain_events(self) -> List[DomainEvent]:
        """Return collected events and clear them (after persisting)."""
        events = list(self._domain_events)
        self._domain_events.clear()
        return events

    def _change_status(
        self,
        new_status: OrderStatus,
        notes: Optional[str] = None,
        actor_id: Optional[str] = None,
    ) -> None:
        previous_status = self.status
        self.status = new_status
        self.updated_at = utc_now()
        self._domain_events.append(
            OrderStatusChangedEvent(
                order_id=self.id,
                previous_status=previous_status.value,
                new_status=new_status.value,
                notes=notes,
                actor_id=actor_id,
            )
        )

    def _change_payment_status(self, new_status: PaymentStatus) -> None:
        if self.payment_status == new_status:
            return
        previous_status = self.payment_status
        self.payment_status = new_status
        self.updated_at = utc_now()
        self._domain_events.append(
            PaymentStatusChangedEvent(
                order_id=self.id,
                previous_status=previous_status.value,
                new_status=new_status.value,
            )
        )
