"""SQLAlchemy implementation of OrderRepository."""

import logging
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.entities import Order, OrderStatusHistoryEntry
from core.domain.enums import OrderStatus
from core.domain.errors import NotFound
from core.domain.repositories import OrderRepository

from ..mappers import OrderMapper, OrderStatusHistoryMapper
from ..models import OrderModel, OrderStatusHistoryModel


logger = logging.getLogger(__name__)


class SqlAlchemyOrderRepository(OrderRepository):
    """Concrete implementation of OrderRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    async def find_by_id(self, order_id: str) -> Optional[Order]:
        """Retrieve order by unique identifier.

        Args:
            order_id: Order id

        Returns:
            Order if found, None otherwise
        """
        model = await self._session.get(OrderModel, order_id)

        if not model:
            return None

        return OrderMapper.to_domain(model)

    async def list_for_user(self, user_id: str, limit: int = 10, offset: int = 0) -> List[Order]:
        result = await self._session.execute(
            select(OrderModel)
            .where(OrderModel.user_id == user_id)
            .order_by(OrderModel.created_at.desc(), OrderModel.id)
            .limit(limit)
            .offset(offset)
        )
        models = result.scalars().all()

        return [OrderMapper.to_domain(model) for model in models]

    async def count_for_user(self, user_id: str) -> int:
        result = await self._session.execute(
            select(func.count()).select_from(OrderModel).where(OrderModel.user_id == user_id)
        )
        return result.scalar_one()

    async def update(self, order: Order) -> Order:
        """Persist the mutable fields of an existing order.

        Args:
            order: Order aggregate with changes applied

        Returns:
            The same order

        Raises:
            NotFound: If the order row no longer exists
        """
        model = await self._session.get(OrderModel, order.id)
        if model is None:
            raise NotFound("Order not found")

        OrderMapper.update_persistence(order, model)
        self._session.add(model)
        await self._session.flush()  # Propagate to DB without committing

        return order

    async def append_history(
        self,
        order_id: str,
        status: OrderStatus,
        notes: Optional[str],
        created_by: Optional[str] = None,
    ) -> OrderStatusHistoryEntry:
        model = OrderStatusHistoryModel(
            order_id=order_id,
            status=status.value,
            notes=notes,
            created_by=created_by,
        )
        self._session.add(model)
        await self._session.flush()

        logger.info(f"History appended: order={order_id} status={status.value}")
        return OrderStatusHistoryMapper.to_domain(model)

    async def list_history(self, order_id: str) -> List[OrderStatusHistoryEntry]:
        """Status trail ordered by creation time ascending.

        Ties on created_at are broken by insertion order (id).
        """
        result = await self._session.execute(
            select(OrderStatusHistoryModel)
            .where(OrderStatusHistoryModel.order_id == order_id)
            .order_by(OrderStatusHistoryModel.created_at.asc(), OrderStatusHistoryModel.id.asc())
        )
        return [OrderStatusHistoryMapper.to_domain(model) for model in result.scalars().all()]
