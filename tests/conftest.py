"""Shared fixtures: in-memory database, seed helpers, callers and services."""

from decimal import Decimal
from typing import Optional

import pytest
import pytest_asyncio
from sqlalchemy import func, select, update

from core.application.services import (
    NotificationEmitter,
    NotificationInboxService,
    OrderLifecycleService,
    PaymentCoordinator,
    RefundService,
)
from core.data.models import (
    NotificationModel,
    OrderItemModel,
    OrderModel,
    OrderStatusHistoryModel,
    PaymentModel,
    UserModel,
    new_id,
)
from core.domain.enums import OrderStatus, PaymentStatus
from core.domain.value_objects import Caller, OrderNumber
from core.infrastructure.adapters.payments import MockPaymentGateway
from core.infrastructure.database import Database
from core.settings.sections import DatabaseSettings


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def database():
    """Fresh in-memory database with all tables."""
    db = Database(DatabaseSettings(database_url=TEST_DATABASE_URL))
    await db.create_tables()
    yield db
    await db.dispose()


@pytest.fixture
def session_factory(database):
    return database.session_factory


# =============================================================================
# CALLERS
# =============================================================================

@pytest.fixture
def customer() -> Caller:
    return Caller(user_id="u1", role="CUSTOMER", email="u1@example.com")


@pytest.fixture
def other_customer() -> Caller:
    return Caller(user_id="u2", role="CUSTOMER", email="u2@example.com")


@pytest.fixture
def admin() -> Caller:
    return Caller(user_id="admin-1", role="ADMIN", email="admin@example.com")


# =============================================================================
# SEEDING
# =============================================================================

class Seeder:
    """Writes rows straight through the ORM, bypassing the services under test."""

    def __init__(self, session_factory):
        self._session_factory = session_factory

    async def user(
        self,
        user_id: str,
        email: Optional[str] = None,
        role: str = "CUSTOMER",
        phone: Optional[str] = None,
    ) -> str:
        async with self._session_factory() as session:
            session.add(UserModel(
                id=user_id,
                email=email or f"{user_id}@example.com",
                name=user_id.upper(),
                phone=phone,
                role=role,
            ))
            await session.commit()
        return user_id

    async def order(
        self,
        user_id: str = "u1",
        status: OrderStatus = OrderStatus.PENDING,
        payment_status: PaymentStatus = PaymentStatus.PENDING,
        total: str = "500.00",
        order_id: Optional[str] = None,
    ) -> str:
        async with self._session_factory() as session:
            model = OrderModel(
                id=order_id or new_id(),
                order_number=OrderNumber.generate().value,
                user_id=user_id,
                status=status.value,
                payment_status=payment_status.value,
                total=Decimal(total),
                currency="INR",
            )
            model.items = [
                OrderItemModel(
                    product_id="p1",
                    product_name="Cotton Kurta",
                    quantity=1,
                    price=Decimal(total),
                )
            ]
            session.add(model)
            await session.commit()
            return model.id

    async def payment(
        self,
        order_id: str,
        gateway_order_id: str,
        status: PaymentStatus = PaymentStatus.PENDING,
        amount: str = "500.00",
    ) -> str:
        async with self._session_factory() as session:
            model = PaymentModel(
                order_id=order_id,
                gateway_order_id=gateway_order_id,
                amount=Decimal(amount),
                currency="INR",
                status=status.value,
                email="u1@example.com",
            )
            session.add(model)
            await session.commit()
            return model.id

    async def notification(self, user_id: str, title: str = "Hello", is_read: bool = False) -> str:
        async with self._session_factory() as session:
            model = NotificationModel(
                user_id=user_id,
                title=title,
                message=f"{title} message",
                type="SYSTEM",
                is_read=is_read,
            )
            session.add(model)
            await session.commit()
            return model.id

    async def update_order(self, order_id: str, **values) -> None:
        async with self._session_factory() as session:
            await session.execute(update(OrderModel).where(OrderModel.id == order_id).values(**values))
            await session.commit()

    async def update_payment(self, order_id: str, **values) -> None:
        async with self._session_factory() as session:
            await session.execute(update(PaymentModel).where(PaymentModel.order_id == order_id).values(**values))
            await session.commit()

    async def get_order(self, order_id: str) -> OrderModel:
        async with self._session_factory() as session:
            return await session.get(OrderModel, order_id)

    async def get_payment(self, order_id: str) -> Optional[PaymentModel]:
        async with self._session_factory() as session:
            result = await session.execute(select(PaymentModel).where(PaymentModel.order_id == order_id))
            return result.scalar_one_or_none()

    async def history(self, order_id: str) -> list[OrderStatusHistoryModel]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(OrderStatusHistoryModel)
                .where(OrderStatusHistoryModel.order_id == order_id)
                .order_by(OrderStatusHistoryModel.id)
            )
            return list(result.scalars().all())

    async def notifications(self, user_id: str) -> list[NotificationModel]:
        async with self._session_factory() as session:
            result = await session.execute(
                select(NotificationModel).where(NotificationModel.user_id == user_id)
            )
            return list(result.scalars().all())

    async def count(self, model) -> int:
        async with self._session_factory() as session:
            result = await session.execute(select(func.count()).select_from(model))
            return result.scalar_one()


@pytest_asyncio.fixture
async def seed(session_factory) -> Seeder:
    seeder = Seeder(session_factory)
    await seeder.user("u1", phone="+919800000001")
    await seeder.user("u2")
    await seeder.user("admin-1", role="ADMIN")
    return seeder


# =============================================================================
# SERVICES
# =============================================================================

@pytest.fixture
def gateway() -> MockPaymentGateway:
    return MockPaymentGateway(key_id="rzp_test_key", key_secret="test_secret", webhook_secret="hook_secret")


@pytest.fixture
def emitter() -> NotificationEmitter:
    return NotificationEmitter(best_effort=True)


@pytest.fixture
def order_service(session_factory, emitter) -> OrderLifecycleService:
    return OrderLifecycleService(session_factory, emitter)


@pytest.fixture
def payment_coordinator(session_factory, gateway, emitter) -> PaymentCoordinator:
    return PaymentCoordinator(session_factory, gateway, emitter, currency="INR")


@pytest.fixture
def refund_service(session_factory, emitter) -> RefundService:
    return RefundService(session_factory, emitter)


@pytest.fixture
def inbox_service(session_factory) -> NotificationInboxService:
    return NotificationInboxService(session_factory)
