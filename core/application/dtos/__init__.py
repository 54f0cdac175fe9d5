"""Application DTOs (camelCase on the wire)."""

from .notification_dto import MarkReadRequest, MessageDTO, NotificationDTO, NotificationListDTO
from .order_dto import (
    AdminOrderUpdateRequest,
    CamelModel,
    CancelOrderRequest,
    CancelOrderResponse,
    OrderDTO,
    OrderHistoryDTO,
    OrderHistoryEntryDTO,
    OrderItemDTO,
    OrderListDTO,
    PaginationDTO,
)
from .payment_dto import (
    CreatePaymentRequest,
    PaymentIntentDTO,
    ProcessRefundRequest,
    ProcessRefundResponse,
    RefundDTO,
    RefundLookupDTO,
    RefundRequest,
    RefundResponse,
    VerifyPaymentRequest,
    VerifyPaymentResponse,
    WebhookAck,
)

__all__ = [
    "AdminOrderUpdateRequest",
    "CamelModel",
    "CancelOrderRequest",
    "CancelOrderResponse",
    "CreatePaymentRequest",
    "MarkReadRequest",
    "MessageDTO",
    "NotificationDTO",
    "NotificationListDTO",
    "OrderDTO",
    "OrderHistoryDTO",
    "OrderHistoryEntryDTO",
    "OrderItemDTO",
    "OrderListDTO",
    "PaginationDTO",
    "PaymentIntentDTO",
    "ProcessRefundRequest",
    "ProcessRefundResponse",
    "RefundDTO",
    "RefundLookupDTO",
    "RefundRequest",
    "RefundResponse",
    "VerifyPaymentRequest",
    "VerifyPaymentResponse",
    "WebhookAck",
]
