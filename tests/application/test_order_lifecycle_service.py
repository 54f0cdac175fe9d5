"""Application tests for OrderLifecycleService against a real (in-memory) database."""

import pytest
from unittest.mock import AsyncMock, patch

from core.application.services import NotificationEmitter, OrderLifecycleService
from core.data.models import NotificationModel, OrderStatusHistoryModel
from core.data.repositories import SqlAlchemyNotificationRepository
from core.domain.enums import OrderStatus
from core.domain.errors import Forbidden, InvalidTransition, NotFound


# =============================================================================
# CANCEL
# =============================================================================

@pytest.mark.asyncio
async def test_cancel_pending_order_scenario(order_service, seed, customer):
    order_id = await seed.order(user_id="u1", status=OrderStatus.PENDING, total="500.00")

    result = await order_service.cancel(order_id, customer, reason="changed mind")

    assert result.status == OrderStatus.CANCELLED
    assert result.cancel_reason == "changed mind"

    stored = await seed.get_order(order_id)
    assert stored.status == "CANCELLED"
    assert stored.cancel_reason == "changed mind"
    assert stored.cancelled_at is not None

    history = await seed.history(order_id)
    assert len(history) == 1
    assert history[0].status == "CANCELLED"
    assert history[0].notes == "Cancelled by customer. Reason: changed mind"

    notifications = await seed.notifications("u1")
    assert len(notifications) == 1
    assert notifications[0].title == "Order Cancelled"
    assert notifications[0].message == f"Your order #{stored.order_number} has been cancelled."
    assert notifications[0].is_read is False
    assert notifications[0].link == "/dashboard"


@pytest.mark.asyncio
async def test_cancel_processing_order(order_service, seed, customer):
    order_id = await seed.order(status=OrderStatus.PROCESSING)

    result = await order_service.cancel(order_id, customer)

    assert result.status == OrderStatus.CANCELLED
    assert result.cancel_reason == "No reason provided"
    assert len(await seed.history(order_id)) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status", [OrderStatus.SHIPPED, OrderStatus.DELIVERED, OrderStatus.CANCELLED]
)
async def test_cancel_rejected_writes_nothing(order_service, seed, customer, status):
    order_id = await seed.order(status=status)
    before = await seed.get_order(order_id)

    with pytest.raises(InvalidTransition):
        await order_service.cancel(order_id, customer, reason="please")

    after = await seed.get_order(order_id)
    assert after.status == status.value
    assert after.cancel_reason is None
    assert after.updated_at == before.updated_at
    assert await seed.count(OrderStatusHistoryModel) == 0
    assert await seed.count(NotificationModel) == 0


@pytest.mark.asyncio
@pytest.mark.parametrize("status", list(OrderStatus))
async def test_cancel_by_non_owner_is_not_found(order_service, seed, other_customer, status):
    order_id = await seed.order(user_id="u1", status=status)

    with pytest.raises(NotFound) as exc_info:
        await order_service.cancel(order_id, other_customer)

    assert exc_info.value.message == "Order not found"
    assert (await seed.get_order(order_id)).status == status.value


@pytest.mark.asyncio
async def test_cancel_missing_order_is_not_found(order_service, seed, customer):
    with pytest.raises(NotFound) as exc_info:
        await order_service.cancel("does-not-exist", customer)

    assert exc_info.value.message == "Order not found"


@pytest.mark.asyncio
async def test_failed_notification_does_not_undo_cancellation(order_service, seed, customer):
    order_id = await seed.order()

    with patch.object(
        SqlAlchemyNotificationRepository, "create", AsyncMock(side_effect=RuntimeError("inbox down"))
    ):
        result = await order_service.cancel(order_id, customer, reason="changed mind")

    assert result.status == OrderStatus.CANCELLED
    assert (await seed.get_order(order_id)).status == "CANCELLED"
    assert len(await seed.history(order_id)) == 1
    assert await seed.count(NotificationModel) == 0


@pytest.mark.asyncio
async def test_strict_notifications_roll_back_whole_transition(session_factory, seed, customer):
    service = OrderLifecycleService(session_factory, NotificationEmitter(best_effort=False))
    order_id = await seed.order()

    with patch.object(
        SqlAlchemyNotificationRepository, "create", AsyncMock(side_effect=RuntimeError("inbox down"))
    ):
        with pytest.raises(RuntimeError):
            await service.cancel(order_id, customer)

    assert (await seed.get_order(order_id)).status == "PENDING"
    assert await seed.count(OrderStatusHistoryModel) == 0


# =============================================================================
# ADMIN TRANSITION
# =============================================================================

@pytest.mark.asyncio
async def test_admin_transition_requires_admin(order_service, seed, customer):
    order_id = await seed.order()

    with pytest.raises(Forbidden) as exc_info:
        await order_service.admin_transition(order_id, customer, status=OrderStatus.SHIPPED)

    assert exc_info.value.message == "Admin access required"
    assert (await seed.get_order(order_id)).status == "PENDING"


@pytest.mark.asyncio
async def test_admin_transition_missing_order(order_service, seed, admin):
    with pytest.raises(NotFound):
        await order_service.admin_transition("missing", admin, status=OrderStatus.SHIPPED)


@pytest.mark.asyncio
async def test_admin_status_change_writes_history_and_notification(order_service, seed, admin):
    order_id = await seed.order(status=OrderStatus.PROCESSING)

    result = await order_service.admin_transition(
        order_id, admin, status=OrderStatus.SHIPPED, tracking_number="TRK-1"
    )

    assert result.status == OrderStatus.SHIPPED
    assert result.tracking_number == "TRK-1"
    history = await seed.history(order_id)
    assert len(history) == 1
    assert history[0].status == "SHIPPED"
    assert history[0].notes == "Status updated to SHIPPED"
    assert history[0].created_by == "admin-1"
    notifications = await seed.notifications("u1")
    assert [n.title for n in notifications] == ["Order Status Updated"]
    assert notifications[0].message.endswith("is now SHIPPED.")


@pytest.mark.asyncio
async def test_admin_override_ignores_forward_path(order_service, seed, admin):
    order_id = await seed.order(status=OrderStatus.DELIVERED)

    result = await order_service.admin_transition(order_id, admin, status=OrderStatus.PENDING, notes="Correction")

    assert result.status == OrderStatus.PENDING
    assert result.notes == "Correction"
    assert (await seed.history(order_id))[0].notes == "Correction"


@pytest.mark.asyncio
async def test_admin_tracking_only_patch_writes_no_history(order_service, seed, admin):
    order_id = await seed.order(status=OrderStatus.SHIPPED)

    result = await order_service.admin_transition(order_id, admin, tracking_number="TRK-9")

    assert result.tracking_number == "TRK-9"
    assert result.status == OrderStatus.SHIPPED
    assert await seed.history(order_id) == []
    assert await seed.notifications("u1") == []


@pytest.mark.asyncio
async def test_admin_same_status_writes_no_history(order_service, seed, admin):
    order_id = await seed.order(status=OrderStatus.SHIPPED)

    await order_service.admin_transition(order_id, admin, status=OrderStatus.SHIPPED)

    assert await seed.history(order_id) == []


# =============================================================================
# HISTORY / READS
# =============================================================================

@pytest.mark.asyncio
async def test_history_is_ascending_and_idempotent(order_service, seed, admin, customer):
    order_id = await seed.order()
    await order_service.admin_transition(order_id, admin, status=OrderStatus.PROCESSING)
    await order_service.admin_transition(order_id, admin, status=OrderStatus.SHIPPED)
    await order_service.admin_transition(order_id, admin, status=OrderStatus.DELIVERED)

    first = await order_service.get_history(order_id, customer)
    second = await order_service.get_history(order_id, customer)

    assert [e.status for e in first.history] == [
        OrderStatus.PROCESSING,
        OrderStatus.SHIPPED,
        OrderStatus.DELIVERED,
    ]
    timestamps = [e.created_at for e in first.history]
    assert timestamps == sorted(timestamps)
    assert first == second


@pytest.mark.asyncio
async def test_history_of_foreign_order_is_not_found(order_service, seed, other_customer):
    order_id = await seed.order(user_id="u1")

    with pytest.raises(NotFound):
        await order_service.get_history(order_id, other_customer)


@pytest.mark.asyncio
async def test_get_order_visible_to_owner_and_admin(order_service, seed, customer, other_customer, admin):
    order_id = await seed.order(user_id="u1")

    assert (await order_service.get_order(order_id, customer)).id == order_id
    assert (await order_service.get_order(order_id, admin)).id == order_id
    with pytest.raises(NotFound):
        await order_service.get_order(order_id, other_customer)


@pytest.mark.asyncio
async def test_list_orders_paginates_own_orders(order_service, seed, customer):
    for _ in range(3):
        await seed.order(user_id="u1")
    await seed.order(user_id="u2")

    page = await order_service.list_orders(customer, page=1, limit=2)

    assert len(page.orders) == 2
    assert all(o.user_id == "u1" for o in page.orders)
    assert page.pagination.total == 3
    assert page.pagination.total_pages == 2
