"""SQLAlchemy implementation of PaymentRepository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.entities import Payment
from core.domain.errors import NotFound
from core.domain.repositories import PaymentRepository

from ..mappers import PaymentMapper
from ..models import PaymentModel


class SqlAlchemyPaymentRepository(PaymentRepository):
    """Concrete implementation of PaymentRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_order(self, order_id: str) -> Optional[Payment]:
        result = await self._session.execute(
            select(PaymentModel).where(PaymentModel.order_id == order_id)
        )
        model = result.scalar_one_or_none()
        return PaymentMapper.to_domain(model) if model else None

    async def find_by_gateway_order_id(self, gateway_order_id: str) -> Optional[Payment]:
        result = await self._session.execute(
            select(PaymentModel).where(PaymentModel.gateway_order_id == gateway_order_id)
        )
        model = result.scalar_one_or_none()
        return PaymentMapper.to_domain(model) if model else None

    async def create(self, payment: Payment) -> Payment:
        self._session.add(PaymentMapper.to_persistence(payment))
        await self._session.flush()
        return payment

    async def update(self, payment: Payment) -> Payment:
        model = await self._session.get(PaymentModel, payment.id)
        if model is None:
            raise NotFound("Payment record not found")

        PaymentMapper.update_persistence(payment, model)
        self._session.add(model)
        await self._session.flush()
        return payment
