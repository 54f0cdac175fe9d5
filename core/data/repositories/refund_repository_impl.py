"""SQLAlchemy implementations of RefundRepository and CustomerRepository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.entities import Customer, Refund
from core.domain.errors import NotFound
from core.domain.repositories import CustomerRepository, RefundRepository

from ..mappers import CustomerMapper, RefundMapper
from ..models import RefundModel, UserModel


class SqlAlchemyRefundRepository(RefundRepository):
    """Concrete implementation of RefundRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_order(self, order_id: str) -> Optional[Refund]:
        result = await self._session.execute(
            select(RefundModel).where(RefundModel.order_id == order_id)
        )
        model = result.scalar_one_or_none()
        return RefundMapper.to_domain(model) if model else None

    async def find_by_id(self, refund_id: str) -> Optional[Refund]:
        model = await self._session.get(RefundModel, refund_id)
        return RefundMapper.to_domain(model) if model else None

    async def create(self, refund: Refund) -> Refund:
        self._session.add(RefundMapper.to_persistence(refund))
        await self._session.flush()
        return refund

    async def update(self, refund: Refund) -> Refund:
        model = await self._session.get(RefundModel, refund.id)
        if model is None:
            raise NotFound("Refund not found")

        model.status = refund.status.value
        model.processed_at = refund.processed_at
        model.processed_by = refund.processed_by
        model.notes = refund.notes
        await self._session.flush()
        return refund


class SqlAlchemyCustomerRepository(CustomerRepository):
    """Concrete implementation of CustomerRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: str) -> Optional[Customer]:
        model = await self._session.get(UserModel, user_id)
        return CustomerMapper.to_domain(model) if model else None
