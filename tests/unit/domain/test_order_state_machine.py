"""Unit tests for the Order aggregate state machine."""

from decimal import Decimal

import pytest

from core.domain.entities import Order
from core.domain.entities.order import DEFAULT_CANCEL_REASON
from core.domain.enums import OrderStatus, PaymentStatus
from core.domain.errors import InvalidTransition
from core.domain.events import OrderStatusChangedEvent, OrderUpdatedEvent, PaymentStatusChangedEvent
from core.domain.value_objects import Money, OrderNumber


def make_order(status: OrderStatus = OrderStatus.PENDING, **kwargs) -> Order:
    return Order(
        id="o1",
        order_number=OrderNumber(value="ORG-LX2K9Q1A-7F3KD"),
        user_id="u1",
        total=Money(amount=Decimal("500.00")),
        status=status,
        **kwargs,
    )


def status_events(order: Order) -> list[OrderStatusChangedEvent]:
    return [e for e in order.pull_domain_events() if isinstance(e, OrderStatusChangedEvent)]


@pytest.mark.parametrize("status", [OrderStatus.PENDING, OrderStatus.PROCESSING])
def test_cancel_from_cancellable_status(status):
    order = make_order(status)

    order.cancel(reason="changed mind", actor_id="u1")

    assert order.status == OrderStatus.CANCELLED
    assert order.cancel_reason == "changed mind"
    assert order.cancelled_at is not None
    events = status_events(order)
    assert len(events) == 1
    assert events[0].previous_status == status.value
    assert events[0].new_status == "CANCELLED"
    assert events[0].notes == "Cancelled by customer. Reason: changed mind"
    assert events[0].actor_id == "u1"


def test_cancel_without_reason_uses_default():
    order = make_order()

    order.cancel()

    assert order.cancel_reason == DEFAULT_CANCEL_REASON
    assert status_events(order)[0].notes == f"Cancelled by customer. Reason: {DEFAULT_CANCEL_REASON}"


@pytest.mark.parametrize(
    "status", [OrderStatus.SHIPPED, OrderStatus.DELIVERED, OrderStatus.CANCELLED]
)
def test_cancel_rejected_leaves_order_untouched(status):
    order = make_order(status)
    updated_at = order.updated_at

    with pytest.raises(InvalidTransition) as exc_info:
        order.cancel(reason="too late")

    assert "cannot be cancelled" in exc_info.value.message
    assert order.status == status
    assert order.cancelled_at is None
    assert order.cancel_reason is None
    assert order.updated_at == updated_at
    assert order.pull_domain_events() == []


def test_override_skips_forward_path_check():
    order = make_order(OrderStatus.DELIVERED)

    changed = order.override(status=OrderStatus.PENDING, actor_id="admin-1")

    assert changed is True
    assert order.status == OrderStatus.PENDING
    events = status_events(order)
    assert len(events) == 1
    assert events[0].notes == "Status updated to PENDING"
    assert events[0].actor_id == "admin-1"


def test_override_uses_notes_as_history_note():
    order = make_order()

    order.override(status=OrderStatus.SHIPPED, notes="Handed to courier")

    assert order.notes == "Handed to courier"
    assert status_events(order)[0].notes == "Handed to courier"


def test_override_same_status_records_no_status_change():
    order = make_order(OrderStatus.PROCESSING)

    changed = order.override(status=OrderStatus.PROCESSING)

    assert changed is False
    assert status_events(order) == []


def test_override_tracking_only():
    order = make_order(OrderStatus.SHIPPED)

    changed = order.override(tracking_number="TRK123")

    assert changed is False
    assert order.tracking_number == "TRK123"
    events = order.pull_domain_events()
    assert not any(isinstance(e, OrderStatusChangedEvent) for e in events)
    updates = [e for e in events if isinstance(e, OrderUpdatedEvent)]
    assert updates[0].updated_fields == {"tracking_number": "TRK123"}


def test_payment_capture_moves_pending_to_processing():
    order = make_order()

    changed = order.record_payment_captured()

    assert changed is True
    assert order.status == OrderStatus.PROCESSING
    assert order.payment_status == PaymentStatus.COMPLETED
    assert status_events(order)[0].notes == "Payment received"


def test_payment_capture_keeps_later_status():
    order = make_order(OrderStatus.SHIPPED)

    changed = order.record_payment_captured()

    assert changed is False
    assert order.status == OrderStatus.SHIPPED
    assert order.payment_status == PaymentStatus.COMPLETED
    assert status_events(order) == []


def test_payment_failed_only_touches_payment_status():
    order = make_order()

    order.record_payment_failed()

    assert order.status == OrderStatus.PENDING
    assert order.payment_status == PaymentStatus.FAILED
    events = order.pull_domain_events()
    assert len(events) == 1
    assert isinstance(events[0], PaymentStatusChangedEvent)
    assert order.pull_domain_events() == []


@pytest.mark.parametrize(
    "current, target, allowed",
    [
        (OrderStatus.PENDING, OrderStatus.PROCESSING, True),
        (OrderStatus.PROCESSING, OrderStatus.SHIPPED, True),
        (OrderStatus.SHIPPED, OrderStatus.DELIVERED, True),
        (OrderStatus.PROCESSING, OrderStatus.CANCELLED, True),
        (OrderStatus.SHIPPED, OrderStatus.CANCELLED, False),
        (OrderStatus.DELIVERED, OrderStatus.PENDING, False),
        (OrderStatus.CANCELLED, OrderStatus.PROCESSING, False),
    ],
)
def test_forward_path(current, target, allowed):
    assert make_order(current).can_transition_to(target) is allowed


def test_approved_refund_cancels_once():
    order = make_order(OrderStatus.CANCELLED)

    changed = order.approve_refund(actor_id="admin-1")

    assert changed is False
    assert order.payment_status == PaymentStatus.REFUNDED
    assert status_events(order) == []
