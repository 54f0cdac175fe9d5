"""Concurrent Units of Work against a file-backed SQLite database."""

import asyncio

import pytest
import pytest_asyncio

from core.application.dtos import OrderDTO
from core.data.models import NotificationModel, OrderStatusHistoryModel
from core.domain.enums import OrderStatus
from core.domain.errors import InvalidTransition
from core.infrastructure.database import Database
from core.settings.sections import DatabaseSettings


@pytest_asyncio.fixture
async def database(tmp_path):
    """File database; each session gets its own pooled connection."""
    db = Database(DatabaseSettings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'storefront.db'}"))
    await db.create_tables()
    yield db
    await db.dispose()


@pytest.mark.asyncio
async def test_concurrent_cancels_commit_independently(order_service, seed, customer):
    pending = [await seed.order(status=OrderStatus.PENDING) for _ in range(5)]
    delivered = [await seed.order(status=OrderStatus.DELIVERED) for _ in range(5)]
    interleaved = [order_id for pair in zip(pending, delivered) for order_id in pair]

    results = await asyncio.gather(
        *(order_service.cancel(order_id, customer, reason="Changed my mind") for order_id in interleaved),
        return_exceptions=True,
    )

    cancelled = [r for r in results if isinstance(r, OrderDTO)]
    rejected = [r for r in results if isinstance(r, InvalidTransition)]
    assert len(cancelled) == 5
    assert len(rejected) == 5
    for order_id in pending:
        assert (await seed.get_order(order_id)).status == "CANCELLED"
        assert len(await seed.history(order_id)) == 1
    for order_id in delivered:
        assert (await seed.get_order(order_id)).status == "DELIVERED"
    assert await seed.count(OrderStatusHistoryModel) == 5
    assert await seed.count(NotificationModel) == 5


@pytest.mark.asyncio
async def test_concurrent_admin_updates_of_one_order_each_write_history(order_service, seed, admin):
    order_id = await seed.order(status=OrderStatus.PENDING)
    targets = [OrderStatus.PROCESSING, OrderStatus.SHIPPED, OrderStatus.DELIVERED]

    results = await asyncio.gather(
        *(order_service.admin_transition(order_id, admin, status=status) for status in targets)
    )

    assert all(isinstance(r, OrderDTO) for r in results)
    history = await seed.history(order_id)
    assert len(history) == 3
    assert (await seed.get_order(order_id)).status == history[-1].status
