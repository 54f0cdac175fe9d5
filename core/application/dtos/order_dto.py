"""Application DTOs for Order operations."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from core.domain.entities import Order, OrderStatusHistoryEntry
from core.domain.enums import OrderStatus, PaymentStatus


class CamelModel(BaseModel):
    """Base DTO: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class OrderItemDTO(CamelModel):
    """DTO for order item."""

    product_id: str = Field(..., description="Product id")
    product_name: str = Field(..., description="Product name at checkout")
    quantity: int = Field(..., gt=0, description="Quantity ordered")
    price: Decimal = Field(..., ge=0, description="Unit price")


class OrderDTO(CamelModel):
    """Response DTO for order details."""

    id: str
    order_number: str
    user_id: str
    status: OrderStatus
    payment_status: PaymentStatus
    total: Decimal
    currency: str = "INR"
    tracking_number: Optional[str] = None
    cancelled_at: Optional[datetime] = None
    cancel_reason: Optional[str] = None
    notes: Optional[str] = None
    items: List[OrderItemDTO] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, order: Order) -> "OrderDTO":
        return cls(
            id=order.id,
            order_number=order.order_number.value,
            user_id=order.user_id,
            status=order.status,
            payment_status=order.payment_status,
            total=order.total.amount,
            currency=order.total.currency,
            tracking_number=order.tracking_number,
            cancelled_at=order.cancelled_at,
            cancel_reason=order.cancel_reason,
            notes=order.notes,
            items=[
                OrderItemDTO(
                    product_id=item.product_id,
                    product_name=item.product_name,
                    quantity=item.quantity,
                    price=item.price.amount,
                )
                for item in order.items
            ],
            created_at=order.created_at,
            updated_at=order.updated_at,
        )


class PaginationDTO(CamelModel):
    """Page metadata for list responses."""

    page: int
    limit: int
    total: int
    total_pages: int

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "PaginationDTO":
        return cls(page=page, limit=limit, total=total, total_pages=(total + limit - 1) // limit)


class OrderListDTO(CamelModel):
    """DTO for listing orders."""

    orders: List[OrderDTO] = Field(default_factory=list)
    pagination: PaginationDTO


class CancelOrderRequest(CamelModel):
    """Request DTO for customer cancellation."""

    reason: Optional[str] = Field(default=None, max_length=500)


class CancelOrderResponse(CamelModel):
    message: str = "Order cancelled successfully"
    order: OrderDTO


class AdminOrderUpdateRequest(CamelModel):
    """Partial admin update; only supplied fields are applied."""

    status: Optional[OrderStatus] = None
    tracking_number: Optional[str] = Field(default=None, max_length=100)
    notes: Optional[str] = None


class OrderHistoryEntryDTO(CamelModel):
    id: int
    order_id: str
    status: OrderStatus
    notes: Optional[str] = None
    created_by: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, entry: OrderStatusHistoryEntry) -> "OrderHistoryEntryDTO":
        return cls(
            id=entry.id,
            order_id=entry.order_id,
            status=entry.status,
            notes=entry.notes,
            created_by=entry.created_by,
            created_at=entry.created_at,
        )


class OrderHistoryDTO(CamelModel):
    """Status trail of one order, oldest first."""

    history: List[OrderHistoryEntryDTO] = Field(default_factory=list)
