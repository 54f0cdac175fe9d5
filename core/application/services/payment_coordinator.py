"""Application service for payment intents and payment reconciliation."""

import json
import logging
from typing import Any, Dict, Optional
from uuid import uuid4

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos import PaymentIntentDTO, VerifyPaymentResponse
from core.application.interfaces import IPaymentGateway
from core.data.uow import UnitOfWork, create_uow
from core.domain.entities import Order, Payment
from core.domain.enums import PaymentStatus
from core.domain.errors import AlreadyPaid, InvalidSignature, NotFound, ValidationFailed
from core.domain.transitions import PaymentCapture
from core.domain.value_objects import Caller, Money

from .notification_emitter import NotificationEmitter
from .order_lifecycle_service import apply_transition


logger = logging.getLogger(__name__)


class PaymentCoordinator:
    """
    Creates gateway payment intents and reconciles their outcome.

    Responsibilities:
    - Convert order totals to minor units and call the gateway
    - Keep exactly one Payment row per order
    - Apply PaymentCapture when the gateway (or the client handoff) confirms payment
    """

    def __init__(
        self,
        session_factory: async_sessionmaker,
        gateway: IPaymentGateway,
        emitter: NotificationEmitter,
        currency: str = "INR",
    ) -> None:
        """Initialize payment coordinator.

        Args:
            session_factory: SQLAlchemy async session factory
            gateway: Payment gateway port
            emitter: Notification emitter for capture notifications
            currency: Currency sent to the gateway
        """
        self._session_factory = session_factory
        self._gateway = gateway
        self._emitter = emitter
        self._currency = currency

    async def create_payment_intent(self, order_id: str, caller: Caller) -> PaymentIntentDTO:
        """
        Mint a gateway order for an unpaid order and record a PENDING payment.

        The gateway call happens between two Units of Work so no transaction
        is held open across the network round trip.

        Raises:
            NotFound: If the order is missing or owned by someone else
            AlreadyPaid: If the order's payment is completed
            UpstreamUnavailable: If the gateway call fails after retries
        """
        # 1. Read and validate
        async with create_uow(self._session_factory) as uow:
            order = await self._owned_order(uow, order_id, caller)
            self._ensure_unpaid(order)
            customer = await uow.customers.find_by_id(caller.user_id)

        email = customer.email if customer else caller.email
        contact = customer.phone if customer else None
        amount = Money(amount=order.total.amount, currency=self._currency)
        amount_minor = amount.to_minor_units()

        # 2. Gateway call, outside any transaction
        gateway_order = await self._gateway.create_order(
            amount=amount_minor,
            currency=self._currency,
            receipt=order.order_number.value,
            notes={"orderId": order.id, "userId": caller.user_id},
        )

        # 3. Re-check and persist
        async with create_uow(self._session_factory) as uow:
            order = await self._owned_order(uow, order_id, caller)
            self._ensure_unpaid(order)

            payment = await uow.payments.find_by_order(order.id)
            if payment is None:
                payment = Payment(
                    id=str(uuid4()),
                    order_id=order.id,
                    gateway_order_id=gateway_order.gateway_order_id,
                    amount=amount,
                    email=email,
                    contact=contact,
                )
                await uow.payments.create(payment)
            else:
                if payment.is_completed:
                    raise AlreadyPaid("Order already paid")
                payment.reissue(
                    gateway_order_id=gateway_order.gateway_order_id,
                    amount=amount,
                    email=email,
                    contact=contact,
                )
                await uow.payments.update(payment)

            await uow.commit()

        logger.info(
            f"Payment intent {gateway_order.gateway_order_id} created for order "
            f"{order.order_number} ({amount_minor} {self._currency})"
        )
        return PaymentIntentDTO(
            razorpay_order_id=gateway_order.gateway_order_id,
            amount=gateway_order.amount,
            currency=gateway_order.currency,
            key_id=self._gateway.key_id,
        )

    async def verify_payment(
        self,
        gateway_order_id: Optional[str],
        gateway_payment_id: Optional[str],
        signature: Optional[str],
        caller: Caller,
    ) -> VerifyPaymentResponse:
        """
        Confirm a payment from the client-side checkout handoff.

        Idempotent: verifying an already completed payment changes nothing.

        Raises:
            ValidationFailed: If any handoff field is missing
            InvalidSignature: If the signature does not match
            NotFound: If the payment is unknown or its order is someone else's
        """
        if not (gateway_order_id and gateway_payment_id and signature):
            raise ValidationFailed("Missing payment details")

        if not self._gateway.verify_payment_signature(gateway_order_id, gateway_payment_id, signature):
            logger.warning(f"Invalid payment signature for gateway order {gateway_order_id}")
            raise InvalidSignature("Invalid payment signature")

        async with create_uow(self._session_factory) as uow:
            payment = await uow.payments.find_by_gateway_order_id(gateway_order_id)
            if payment is None:
                raise NotFound("Payment record not found")

            order = await uow.orders.find_by_id(payment.order_id)
            if order is None or not order.is_owned_by(caller.user_id):
                raise NotFound("Payment record not found")

            if payment.is_completed:
                logger.info(f"Payment {gateway_payment_id} already verified")
                return VerifyPaymentResponse(order_id=order.id)

            payment.complete(gateway_payment_id=gateway_payment_id, signature=signature)
            await uow.payments.update(payment)
            await apply_transition(uow, order, PaymentCapture(), self._emitter)
            await uow.commit()

        logger.info(f"Payment {gateway_payment_id} verified for order {order.order_number}")
        return VerifyPaymentResponse(order_id=order.id)

    async def handle_webhook(self, body: bytes, signature: Optional[str]) -> None:
        """
        Reconcile a gateway webhook.

        Handles `payment.captured` and `payment.failed`; other events are
        acknowledged and ignored.

        Raises:
            InvalidSignature: If the signature header is missing or wrong
            ValidationFailed: If the body is not a JSON object
        """
        if not signature or not self._gateway.verify_webhook_signature(body, signature):
            logger.warning("Rejected webhook with missing or invalid signature")
            raise InvalidSignature("Invalid webhook signature")

        try:
            event = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            raise ValidationFailed("Invalid webhook payload")
        if not isinstance(event, dict):
            raise ValidationFailed("Invalid webhook payload")

        event_type = event.get("event")
        entity = self._payment_entity(event)
        logger.info(f"Razorpay webhook event: {event_type}")

        if event_type == "payment.captured":
            await self._on_captured(entity)
        elif event_type == "payment.failed":
            await self._on_failed(entity)
        else:
            logger.info(f"Unhandled webhook event: {event_type}")

    async def _on_captured(self, entity: Dict[str, Any]) -> None:
        async with create_uow(self._session_factory) as uow:
            payment = await self._payment_for_entity(uow, entity)
            if payment is None or payment.status != PaymentStatus.PENDING:
                return

            payment.complete(gateway_payment_id=entity.get("id"), method=entity.get("method"))
            await uow.payments.update(payment)

            order = await uow.orders.find_by_id(payment.order_id)
            if order is None:
                # Money was captured; keep the payment record even without its order
                logger.error(f"Payment {payment.id} captured but order {payment.order_id} is missing")
            else:
                await apply_transition(uow, order, PaymentCapture(), self._emitter)
            await uow.commit()

        logger.info(f"Payment captured for order: {payment.order_id}")

    async def _on_failed(self, entity: Dict[str, Any]) -> None:
        async with create_uow(self._session_factory) as uow:
            payment = await self._payment_for_entity(uow, entity)
            if payment is None or payment.is_completed:
                return

            payment.fail(gateway_payment_id=entity.get("id"))
            await uow.payments.update(payment)

            order = await uow.orders.find_by_id(payment.order_id)
            if order is not None:
                order.record_payment_failed()
                order.pull_domain_events()
                await uow.orders.update(order)
            await uow.commit()

        logger.info(f"Payment failed for order: {payment.order_id}")

    @staticmethod
    async def _payment_for_entity(uow: UnitOfWork, entity: Dict[str, Any]) -> Optional[Payment]:
        gateway_order_id = entity.get("order_id")
        if not gateway_order_id:
            logger.warning("Webhook payment entity without order_id")
            return None

        payment = await uow.payments.find_by_gateway_order_id(gateway_order_id)
        if payment is None:
            logger.warning(f"No payment recorded for gateway order {gateway_order_id}")
        return payment

    @staticmethod
    def _payment_entity(event: Dict[str, Any]) -> Dict[str, Any]:
        node: Any = event.get("payload")
        for key in ("payment", "entity"):
            node = node.get(key) if isinstance(node, dict) else None
        return node if isinstance(node, dict) else {}

    @staticmethod
    async def _owned_order(uow: UnitOfWork, order_id: str, caller: Caller) -> Order:
        order = await uow.orders.find_by_id(order_id)
        if order is None or not order.is_owned_by(caller.user_id):
            raise NotFound("Order not found")
        return order

    @staticmethod
    def _ensure_unpaid(order: Order) -> None:
        if order.payment_status == PaymentStatus.COMPLETED:
            logger.warning(f"Payment intent refused: order {order.order_number} already paid")
            raise AlreadyPaid("Order already paid")
