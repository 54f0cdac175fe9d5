"""Application service for the order lifecycle."""

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos import (
    OrderDTO,
    OrderHistoryDTO,
    OrderHistoryEntryDTO,
    OrderListDTO,
    PaginationDTO,
)
from core.data.uow import UnitOfWork, create_uow
from core.domain.entities import Order
from core.domain.enums import OrderStatus
from core.domain.errors import NotFound, OrderFlowError
from core.domain.events import OrderStatusChangedEvent
from core.domain.transitions import AdministrativeOverride, CustomerCancellation, OrderTransition
from core.domain.value_objects import Caller

from .notification_emitter import NotificationEmitter


logger = logging.getLogger(__name__)


async def apply_transition(
    uow: UnitOfWork,
    order: Order,
    transition: OrderTransition,
    emitter: NotificationEmitter,
) -> None:
    """
    Run a transition against a loaded order and stage its writes.

    Write order: order row, then one history row per status change, then
    the notification. The caller commits the Unit of Work.
    """
    draft = transition.run(order)

    # 1. Order row first
    await uow.orders.update(order)

    # 2. History trail
    for event in order.pull_domain_events():
        if isinstance(event, OrderStatusChangedEvent):
            await uow.orders.append_history(
                order_id=order.id,
                status=OrderStatus(event.new_status),
                notes=event.notes,
                created_by=event.actor_id,
            )

    # 3. Notification last
    if draft is not None:
        await emitter.emit(uow, draft)


class OrderLifecycleService:
    """
    Application service for orchestrating order lifecycle operations.

    Responsibilities:
    - Load the order and enforce visibility (missing and not-owned look the same)
    - Run the transition and stage order, history and notification writes
    - Commit all of it in one Unit of Work
    """

    def __init__(self, session_factory: async_sessionmaker, emitter: NotificationEmitter) -> None:
        """Initialize order lifecycle service.

        Args:
            session_factory: SQLAlchemy async session factory
            emitter: Notification emitter used for transition side effects
        """
        self._session_factory = session_factory
        self._emitter = emitter

    async def cancel(self, order_id: str, caller: Caller, reason: Optional[str] = None) -> OrderDTO:
        """Customer cancellation of an own order.

        Raises:
            NotFound: If the order is missing or owned by someone else
            InvalidTransition: If the order is already shipped, delivered or cancelled
        """
        transition = CustomerCancellation(caller=caller, reason=reason)

        async with create_uow(self._session_factory) as uow:
            order = await self._find_order(uow, order_id)
            try:
                await apply_transition(uow, order, transition, self._emitter)
            except OrderFlowError as e:
                logger.warning(f"[{uow.execution_id}] Cancel rejected for order {order_id}: {e}")
                raise
            await uow.commit()

        logger.info(f"Order {order.order_number} cancelled by user {caller.user_id}")
        return OrderDTO.from_entity(order)

    async def admin_transition(
        self,
        order_id: str,
        caller: Caller,
        status: Optional[OrderStatus] = None,
        tracking_number: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> OrderDTO:
        """Administrative override of status, tracking number and notes.

        Raises:
            Forbidden: If the caller is not an admin
            NotFound: If the order does not exist
        """
        transition = AdministrativeOverride(
            caller=caller,
            status=status,
            tracking_number=tracking_number,
            notes=notes,
        )
        try:
            transition.authorize()
        except OrderFlowError as e:
            logger.warning(f"Admin update of order {order_id} rejected for user {caller.user_id}: {e}")
            raise

        async with create_uow(self._session_factory) as uow:
            order = await uow.orders.find_by_id(order_id)
            if order is None:
                raise NotFound("Order not found")

            await apply_transition(uow, order, transition, self._emitter)
            await uow.commit()

        logger.info(
            f"Order {order.order_number} updated by admin {caller.user_id}: status={order.status.value}"
        )
        return OrderDTO.from_entity(order)

    async def get_history(self, order_id: str, caller: Caller) -> OrderHistoryDTO:
        """Status trail of an own order, oldest first.

        Raises:
            NotFound: If the order is missing or owned by someone else
        """
        async with create_uow(self._session_factory) as uow:
            order = await self._find_order(uow, order_id)
            if not order.is_owned_by(caller.user_id):
                raise NotFound("Order not found")

            entries = await uow.orders.list_history(order.id)

        return OrderHistoryDTO(history=[OrderHistoryEntryDTO.from_entity(e) for e in entries])

    async def get_order(self, order_id: str, caller: Caller) -> OrderDTO:
        """Single order, visible to its owner and to admins."""
        async with create_uow(self._session_factory) as uow:
            order = await self._find_order(uow, order_id)
            if not (caller.is_admin or order.is_owned_by(caller.user_id)):
                raise NotFound("Order not found")

        return OrderDTO.from_entity(order)

    async def list_orders(self, caller: Caller, page: int = 1, limit: int = 10) -> OrderListDTO:
        """The caller's own orders, newest first."""
        offset = (page - 1) * limit
        async with create_uow(self._session_factory) as uow:
            orders: List[Order] = await uow.orders.list_for_user(caller.user_id, limit=limit, offset=offset)
            total = await uow.orders.count_for_user(caller.user_id)

        return OrderListDTO(
            orders=[OrderDTO.from_entity(order) for order in orders],
            pagination=PaginationDTO.build(page=page, limit=limit, total=total),
        )

    @staticmethod
    async def _find_order(uow: UnitOfWork, order_id: str) -> Order:
        order = await uow.orders.find_by_id(order_id)
        if order is None:
            raise NotFound("Order not found")
        return order
