"""Application service for refund requests and their admin review."""

import logging
from typing import Optional
from uuid import uuid4

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos import ProcessRefundResponse, RefundDTO, RefundLookupDTO, RefundResponse
from core.data.uow import UnitOfWork, create_uow
from core.domain.entities import NotificationDraft, Order, Refund
from core.domain.entities.refund import MIN_REFUND_REASON_LENGTH
from core.domain.enums import NotificationType, PaymentStatus
from core.domain.errors import NotFound, OrderFlowError, ValidationFailed
from core.domain.transitions import ORDER_LINK, RefundDecision
from core.domain.value_objects import Caller

from .notification_emitter import NotificationEmitter
from .order_lifecycle_service import apply_transition


logger = logging.getLogger(__name__)


class RefundService:
    """One refund request per paid order, approved or rejected by an admin."""

    def __init__(self, session_factory: async_sessionmaker, emitter: NotificationEmitter) -> None:
        self._session_factory = session_factory
        self._emitter = emitter

    async def request_refund(self, order_id: str, caller: Caller, reason: str) -> RefundResponse:
        """
        Raises:
            ValidationFailed: Short reason, duplicate request or unpaid order
            NotFound: If the order is missing or owned by someone else
        """
        reason = (reason or "").strip()
        if len(reason) < MIN_REFUND_REASON_LENGTH:
            raise ValidationFailed(
                f"Reason must be at least {MIN_REFUND_REASON_LENGTH} characters"
            )

        async with create_uow(self._session_factory) as uow:
            order = await self._owned_order(uow, order_id, caller)

            if await uow.refunds.find_by_order(order.id) is not None:
                raise ValidationFailed("Refund already requested for this order")
            if order.payment_status != PaymentStatus.COMPLETED:
                raise ValidationFailed("Cannot request refund for unpaid orders")

            refund = Refund(id=str(uuid4()), order_id=order.id, amount=order.total, reason=reason)
            await uow.refunds.create(refund)
            await self._emitter.emit(
                uow,
                NotificationDraft(
                    user_id=order.user_id,
                    title="Refund Requested",
                    message=f"Your refund request for order #{order.order_number} has been submitted.",
                    type=NotificationType.ORDER,
                    link=ORDER_LINK,
                ),
            )
            await uow.commit()

        logger.info(f"Refund requested for order {order.order_number} by user {caller.user_id}")
        return RefundResponse(refund=RefundDTO.from_entity(refund))

    async def get_refund(self, order_id: str, caller: Caller) -> RefundLookupDTO:
        async with create_uow(self._session_factory) as uow:
            order = await self._owned_order(uow, order_id, caller)
            refund = await uow.refunds.find_by_order(order.id)

        return RefundLookupDTO(refund=RefundDTO.from_entity(refund) if refund else None)

    async def process_refund(
        self,
        refund_id: str,
        caller: Caller,
        approve: bool,
        notes: Optional[str] = None,
    ) -> ProcessRefundResponse:
        """
        Approve or reject a pending refund.

        Approval refunds the payment and cancels the order, with one history
        row; either way the owner is notified.

        Raises:
            Forbidden: If the caller is not an admin
            NotFound: If the refund does not exist
            ValidationFailed: If the refund was already processed
        """
        transition = RefundDecision(caller=caller, approve=approve, notes=notes)
        try:
            transition.authorize()
        except OrderFlowError as e:
            logger.warning(f"Refund decision on {refund_id} rejected for user {caller.user_id}: {e}")
            raise

        async with create_uow(self._session_factory) as uow:
            refund = await uow.refunds.find_by_id(refund_id)
            if refund is None:
                raise NotFound("Refund not found")

            order = await uow.orders.find_by_id(refund.order_id)
            if order is None:
                raise NotFound("Order not found")

            refund.process(approve=approve, admin_id=caller.user_id, notes=notes)
            await uow.refunds.update(refund)
            await apply_transition(uow, order, transition, self._emitter)
            await uow.commit()

        outcome = refund.status.value.lower()
        logger.info(f"Refund {refund.id} for order {order.order_number} {outcome} by admin {caller.user_id}")
        return ProcessRefundResponse(
            message=f"Refund {outcome} successfully",
            refund=RefundDTO.from_entity(refund),
        )

    @staticmethod
    async def _owned_order(uow: UnitOfWork, order_id: str, caller: Caller) -> Order:
        order = await uow.orders.find_by_id(order_id)
        if order is None or not order.is_owned_by(caller.user_id):
            raise NotFound("Order not found")
        return order
