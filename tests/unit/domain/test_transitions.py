"""Unit tests for order transitions (preconditions and notifications)."""

from decimal import Decimal

import pytest

from core.domain.entities import Order, Refund
from core.domain.enums import NotificationType, OrderStatus, PaymentStatus, RefundStatus
from core.domain.errors import Forbidden, NotFound, ValidationFailed
from core.domain.transitions import (
    ORDER_LINK,
    AdministrativeOverride,
    CustomerCancellation,
    PaymentCapture,
    RefundDecision,
)
from core.domain.value_objects import Caller, Money, OrderNumber


@pytest.fixture
def order() -> Order:
    return Order(
        id="o1",
        order_number=OrderNumber(value="ORG-LX2K9Q1A-7F3KD"),
        user_id="u1",
        total=Money(amount=Decimal("500.00")),
    )


def test_cancellation_notifies_owner(order):
    draft = CustomerCancellation(Caller(user_id="u1"), reason="changed mind").run(order)

    assert order.status == OrderStatus.CANCELLED
    assert draft.user_id == "u1"
    assert draft.title == "Order Cancelled"
    assert draft.message == "Your order #ORG-LX2K9Q1A-7F3KD has been cancelled."
    assert draft.type == NotificationType.ORDER
    assert draft.link == ORDER_LINK


def test_cancellation_by_non_owner_is_not_found(order):
    with pytest.raises(NotFound) as exc_info:
        CustomerCancellation(Caller(user_id="u2")).run(order)

    assert exc_info.value.message == "Order not found"
    assert order.status == OrderStatus.PENDING


def test_override_requires_admin(order):
    transition = AdministrativeOverride(Caller(user_id="u1"), status=OrderStatus.SHIPPED)

    with pytest.raises(Forbidden):
        transition.run(order)
    assert order.status == OrderStatus.PENDING


def test_override_notifies_on_status_change(order):
    draft = AdministrativeOverride(
        Caller(user_id="admin-1", role="ADMIN"), status=OrderStatus.SHIPPED
    ).run(order)

    assert draft.title == "Order Status Updated"
    assert draft.message == "Your order #ORG-LX2K9Q1A-7F3KD is now SHIPPED."
    assert draft.user_id == "u1"


def test_override_without_status_change_is_silent(order):
    draft = AdministrativeOverride(
        Caller(user_id="admin-1", role="ADMIN"), tracking_number="TRK1"
    ).run(order)

    assert draft is None


def test_payment_capture_notification(order):
    draft = PaymentCapture().run(order)

    assert draft.title == "Payment Successful"
    assert draft.type == NotificationType.PAYMENT
    assert order.status == OrderStatus.PROCESSING


def test_refund_approval_cancels_and_notifies(order):
    draft = RefundDecision(Caller(user_id="admin-1", role="ADMIN"), approve=True).run(order)

    assert order.status == OrderStatus.CANCELLED
    assert order.payment_status == PaymentStatus.REFUNDED
    assert draft.title == "Refund APPROVED"
    assert draft.message == "Your refund request for order #ORG-LX2K9Q1A-7F3KD has been approved."


def test_refund_rejection_only_notifies(order):
    draft = RefundDecision(Caller(user_id="admin-1", role="ADMIN"), approve=False).run(order)

    assert order.status == OrderStatus.PENDING
    assert order.pull_domain_events() == []
    assert draft.title == "Refund REJECTED"


def test_refund_decision_by_customer_is_forbidden(order):
    with pytest.raises(Forbidden):
        RefundDecision(Caller(user_id="u1"), approve=True).run(order)

    assert order.status == OrderStatus.PENDING


def test_refund_is_processed_once():
    refund = Refund(id="r1", order_id="o1", amount=Money(amount=Decimal("500.00")), reason="Item arrived damaged")

    refund.process(approve=True, admin_id="admin-1", notes="ok")

    assert refund.status == RefundStatus.APPROVED
    assert refund.processed_by == "admin-1"
    with pytest.raises(ValidationFailed) as exc_info:
        refund.process(approve=False, admin_id="admin-1")
    assert exc_info.value.message == "Refund has already been processed"
    assert refund.status == RefundStatus.APPROVED
