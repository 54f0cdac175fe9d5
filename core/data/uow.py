"""Unit of Work pattern for atomic transactions."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.domain.value_objects import ExecutionID

from .repositories import (
    SqlAlchemyCustomerRepository,
    SqlAlchemyNotificationRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyPaymentRepository,
    SqlAlchemyRefundRepository,
)


logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    Unit of Work pattern for atomic transactions.

    Responsibilities:
    1. Manage SQLAlchemy session lifecycle
    2. Propagate ExecutionID across all operations
    3. Atomic commit/rollback of all repository operations
    4. Lazy initialization of repositories

    Usage:
        async with create_uow(session_factory) as uow:
            order = await uow.orders.find_by_id(order_id)
            ...
            await uow.orders.update(order)
            await uow.commit()

    Anything not committed when the block exits is rolled back.
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize Unit of Work.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None
        self._execution_id: Optional[ExecutionID] = None

        # Lazy-loaded repositories
        self._orders: Optional[SqlAlchemyOrderRepository] = None
        self._payments: Optional[SqlAlchemyPaymentRepository] = None
        self._notifications: Optional[SqlAlchemyNotificationRepository] = None
        self._refunds: Optional[SqlAlchemyRefundRepository] = None
        self._customers: Optional[SqlAlchemyCustomerRepository] = None

    async def __aenter__(self) -> "UnitOfWork":
        """Start transaction scope."""
        self._session = self._session_factory()
        self._execution_id = ExecutionID.generate()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Rollback on exception (or uncommitted work), then close."""
        if exc_type is not None:
            logger.warning(f"[{self._execution_id}] Transaction failed: {exc_val!r}")
        await self._session.rollback()
        await self._session.close()

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._session

    @property
    def execution_id(self) -> ExecutionID:
        """Get current execution ID for tracing.

        Returns:
            ExecutionID value object
        """
        if self._execution_id is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._execution_id

    @property
    def orders(self) -> SqlAlchemyOrderRepository:
        """Lazy-load order repository."""
        if self._orders is None:
            self._orders = SqlAlchemyOrderRepository(self.session)
        return self._orders

    @property
    def payments(self) -> SqlAlchemyPaymentRepository:
        """Lazy-load payment repository."""
        if self._payments is None:
            self._payments = SqlAlchemyPaymentRepository(self.session)
        return self._payments

    @property
    def notifications(self) -> SqlAlchemyNotificationRepository:
        """Lazy-load notification repository."""
        if self._notifications is None:
            self._notifications = SqlAlchemyNotificationRepository(self.session)
        return self._notifications

    @property
    def refunds(self) -> SqlAlchemyRefundRepository:
        """Lazy-load refund repository."""
        if self._refunds is None:
            self._refunds = SqlAlchemyRefundRepository(self.session)
        return self._refunds

    @property
    def customers(self) -> SqlAlchemyCustomerRepository:
        """Lazy-load customer repository."""
        if self._customers is None:
            self._customers = SqlAlchemyCustomerRepository(self.session)
        return self._customers

    @asynccontextmanager
    async def savepoint(self) -> AsyncIterator[None]:
        """Nested transaction; a failure inside rolls back only this block."""
        async with self.session.begin_nested():
            yield

    async def commit(self) -> None:
        """Commit all pending changes."""
        await self.session.commit()
        logger.debug(f"[{self._execution_id}] Transaction committed")

    async def rollback(self) -> None:
        """Rollback all pending changes."""
        await self.session.rollback()
        logger.warning(f"[{self._execution_id}] Transaction rolled back")


def create_uow(session_factory: async_sessionmaker) -> UnitOfWork:
    """Create a new Unit of Work instance.

    Args:
        session_factory: SQLAlchemy async session factory

    Returns:
        UnitOfWork instance
    """
    return UnitOfWork(session_factory)
