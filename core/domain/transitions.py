"""
Order transitions.

All changes to an order's lifecycle go through one interface: a transition
checks its preconditions, applies itself to the aggregate, and describes
the notification (if any) the owner should receive. The variants differ
only in their preconditions:

- CustomerCancellation: ownership + state machine checked
- AdministrativeOverride: admin role checked, state machine NOT checked
- PaymentCapture: no caller preconditions (driven by reconciliation)
- RefundDecision: admin role checked; approval cancels the order
"""
from abc import ABC, abstractmethod
from typing import Optional

from .entities import NotificationDraft, Order
from .enums import NotificationType, OrderStatus, RefundStatus
from .errors import Forbidden, NotFound
from .value_objects import Caller


ORDER_LINK = "/dashboard"


class OrderTransition(ABC):
    """Common contract of every order transition."""

    def authorize(self) -> None:
        """Raise a domain error if the caller may not run this transition at all."""

    @abstractmethod
    def check(self, order: Order) -> None:
        """Raise a domain error if the transition may not run on this order."""

    @abstractmethod
    def apply(self, order: Order) -> bool:
        """Mutate the order. Returns True if its status changed."""

    def notification(self, order: Order, status_changed: bool) -> Optional[NotificationDraft]:
        """Notification for the order owner, or None."""
        return None

    def run(self, order: Order) -> Optional[NotificationDraft]:
        """Check, apply and return the notification to emit."""
        self.authorize()
        self.check(order)
        status_changed = self.apply(order)
        return self.notification(order, status_changed)


class CustomerCancellation(OrderTransition):
    """Customer-initiated cancellation (checked against the state machine)."""

    def __init__(self, caller: Caller, reason: Optional[str] = None):
        self.caller = caller
        self.reason = reason

    def check(self, order: Order) -> None:
        # Not-owned looks exactly like missing
        if not order.is_owned_by(self.caller.user_id):
            raise NotFound("Order not found")

    def apply(self, order: Order) -> bool:
        order.cancel(reason=self.reason, actor_id=self.caller.user_id)
        return True

    def notification(self, order: Order, status_changed: bool) -> Optional[NotificationDraft]:
        return NotificationDraft(
            user_id=order.user_id,
            title="Order Cancelled",
            message=f"Your order #{order.order_number.value} has been cancelled.",
            type=NotificationType.ORDER,
            link=ORDER_LINK,
        )


class AdministrativeOverride(OrderTransition):
    """Direct admin update of status / tracking number / notes."""

    def __init__(
        self,
        caller: Caller,
        status: Optional[OrderStatus] = None,
        tracking_number: Optional[str] = None,
        notes: Optional[str] = None,
    ):
        self.caller = caller
        self.status = status
        self.tracking_number = tracking_number
        self.notes = notes

    def authorize(self) -> None:
        if not self.caller.is_admin:
            raise Forbidden("Admin access required")

    def check(self, order: Order) -> None:
        pass

    def apply(self, order: Order) -> bool:
        return order.override(
            status=self.status,
            tracking_number=self.tracking_number,
            notes=self.notes,
            actor_id=self.caller.user_id,
        )

    def notification(self, order: Order, status_changed: bool) -> Optional[NotificationDraft]:
        if not status_changed:
            return None
        return NotificationDraft(
            user_id=order.user_id,
            title="Order Status Updated",
            message=f"Your order #{order.order_number.value} is now {order.status.value}.",
            type=NotificationType.ORDER,
            link=ORDER_LINK,
        )


class PaymentCapture(OrderTransition):
    """Gateway confirmed the payment."""

    def check(self, order: Order) -> None:
        pass

    def apply(self, order: Order) -> bool:
        return order.record_payment_captured()

    def notification(self, order: Order, status_changed: bool) -> Optional[NotificationDraft]:
        return NotificationDraft(
            user_id=order.user_id,
            title="Payment Successful",
            message=f"We received your payment for order #{order.order_number.value}.",
            type=NotificationType.PAYMENT,
            link=ORDER_LINK,
        )


class RefundDecision(OrderTransition):
    """Admin approval or rejection of a refund request."""

    def __init__(self, caller: Caller, approve: bool, notes: Optional[str] = None):
        self.caller = caller
        self.approve = approve
        self.notes = notes

    @property
    def outcome(self) -> RefundStatus:
        return RefundStatus.APPROVED if self.approve else RefundStatus.REJECTED

    def authorize(self) -> None:
        if not self.caller.is_admin:
            raise Forbidden("Admin access required")

    def check(self, order: Order) -> None:
        pass

    def apply(self, order: Order) -> bool:
        if not self.approve:
            return False
        return order.approve_refund(notes=self.notes, actor_id=self.caller.user_id)

    def notification(self, order: Order, status_changed: bool) -> Optional[NotificationDraft]:
        outcome = self.outcome.value
        return NotificationDraft(
            user_id=order.user_id,
            title=f"Refund {outcome}",
            message=(
                f"Your refund request for order #{order.order_number.value} "
                f"has been {outcome.lower()}."
            ),
            type=NotificationType.ORDER,
            link=ORDER_LINK,
        )


__all__ = [
    "OrderTransition",
    "CustomerCancellation",
    "AdministrativeOverride",
    "PaymentCapture",
    "RefundDecision",
    "ORDER_LINK",
]
