"""Static mappers for domain entities ↔ database models."""

from decimal import Decimal

from core.domain.entities import (
    Customer,
    Notification,
    Order,
    OrderItem,
    OrderStatusHistoryEntry,
    Payment,
    Refund,
)
from core.domain.enums import NotificationType, OrderStatus, PaymentStatus, RefundStatus
from core.domain.value_objects import Money, OrderNumber

from .models import (
    NotificationModel,
    OrderItemModel,
    OrderModel,
    OrderStatusHistoryModel,
    PaymentModel,
    RefundModel,
    UserModel,
)


def _money(amount, currency: str) -> Money:
    return Money(amount=Decimal(str(amount)), currency=currency or "INR")


class OrderItemMapper:
    """Static mapper for OrderItem ↔ OrderItemModel transformation."""

    @staticmethod
    def to_domain(model: OrderItemModel, currency: str) -> OrderItem:
        """Convert ORM model to domain entity.

        Args:
            model: OrderItemModel instance
            currency: Currency of the owning order

        Returns:
            OrderItem domain entity
        """
        return OrderItem(
            product_id=model.product_id,
            product_name=model.product_name,
            quantity=model.quantity,
            price=_money(model.price, currency),
        )


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation with nested items."""

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Convert ORM model to domain aggregate (with nested items).

        Args:
            model: OrderModel instance

        Returns:
            Order domain aggregate
        """
        items = [OrderItemMapper.to_domain(item, model.currency) for item in model.items]

        return Order(
            id=model.id,
            order_number=OrderNumber(value=model.order_number),
            user_id=model.user_id,
            total=_money(model.total, model.currency),
            status=OrderStatus(model.status),
            payment_status=PaymentStatus(model.payment_status),
            items=items,
            tracking_number=model.tracking_number,
            cancelled_at=model.cancelled_at,
            cancel_reason=model.cancel_reason,
            notes=model.notes,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def update_persistence(entity: Order, model: OrderModel) -> None:
        """Copy the mutable fields of the aggregate onto an existing ORM model.

        Identity, owner, total and items are fixed at checkout and never copied.

        Args:
            entity: Order domain aggregate
            model: OrderModel to update in place
        """
        model.status = entity.status.value
        model.payment_status = entity.payment_status.value
        model.tracking_number = entity.tracking_number
        model.cancelled_at = entity.cancelled_at
        model.cancel_reason = entity.cancel_reason
        model.notes = entity.notes
        model.updated_at = entity.updated_at


class OrderStatusHistoryMapper:
    """Static mapper for history rows (read-only)."""

    @staticmethod
    def to_domain(model: OrderStatusHistoryModel) -> OrderStatusHistoryEntry:
        return OrderStatusHistoryEntry(
            id=model.id,
            order_id=model.order_id,
            status=OrderStatus(model.status),
            notes=model.notes,
            created_at=model.created_at,
            created_by=model.created_by,
        )


class PaymentMapper:
    """Static mapper for Payment ↔ PaymentModel transformation."""

    @staticmethod
    def to_domain(model: PaymentModel) -> Payment:
        return Payment(
            id=model.id,
            order_id=model.order_id,
            gateway_order_id=model.gateway_order_id,
            amount=_money(model.amount, model.currency),
            status=PaymentStatus(model.status),
            email=model.email,
            contact=model.contact,
            gateway_payment_id=model.gateway_payment_id,
            gateway_signature=model.gateway_signature,
            method=model.method,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def to_persistence(entity: Payment) -> PaymentModel:
        model = PaymentModel(id=entity.id, order_id=entity.order_id, created_at=entity.created_at)
        PaymentMapper.update_persistence(entity, model)
        return model

    @staticmethod
    def update_persistence(entity: Payment, model: PaymentModel) -> None:
        model.gateway_order_id = entity.gateway_order_id
        model.gateway_payment_id = entity.gateway_payment_id
        model.gateway_signature = entity.gateway_signature
        model.method = entity.method
        model.amount = entity.amount.amount
        model.currency = entity.amount.currency
        model.status = entity.status.value
        model.email = entity.email
        model.contact = entity.contact
        model.updated_at = entity.updated_at


class NotificationMapper:
    """Static mapper for Notification ↔ NotificationModel transformation."""

    @staticmethod
    def to_domain(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            title=model.title,
            message=model.message,
            type=NotificationType(model.type),
            link=model.link,
            is_read=bool(model.is_read),
            created_at=model.created_at,
        )


class RefundMapper:
    """Static mapper for Refund ↔ RefundModel transformation."""

    @staticmethod
    def to_domain(model: RefundModel) -> Refund:
        return Refund(
            id=model.id,
            order_id=model.order_id,
            amount=_money(model.amount, model.currency),
            reason=model.reason,
            status=RefundStatus(model.status),
            created_at=model.created_at,
            processed_at=model.processed_at,
            processed_by=model.processed_by,
            notes=model.notes,
        )

    @staticmethod
    def to_persistence(entity: Refund) -> RefundModel:
        return RefundModel(
            id=entity.id,
            order_id=entity.order_id,
            amount=entity.amount.amount,
            currency=entity.amount.currency,
            reason=entity.reason,
            status=entity.status.value,
            created_at=entity.created_at,
            processed_at=entity.processed_at,
            processed_by=entity.processed_by,
            notes=entity.notes,
        )


class CustomerMapper:
    """Static mapper for the contact fields of a user."""

    @staticmethod
    def to_domain(model: UserModel) -> Customer:
        return Customer(id=model.id, email=model.email, name=model.name, phone=model.phone)
