"""Application DTOs for payments, refunds and webhooks."""

from datetime import datetime
from decimal import Decimal
from typing import Literal, Optional

from pydantic import Field

from core.domain.entities import Refund
from core.domain.enums import RefundStatus
from core.domain.entities.refund import MIN_REFUND_REASON_LENGTH

from .order_dto import CamelModel


class CreatePaymentRequest(CamelModel):
    order_id: str = Field(..., min_length=1)


class PaymentIntentDTO(CamelModel):
    """What the client needs to open the Razorpay checkout."""

    razorpay_order_id: str
    amount: int = Field(..., description="Amount in minor units")
    currency: str
    key_id: str


class VerifyPaymentRequest(CamelModel):
    """Checkout handoff fields; presence is checked by the coordinator."""

    razorpay_order_id: Optional[str] = None
    razorpay_payment_id: Optional[str] = None
    razorpay_signature: Optional[str] = None


class VerifyPaymentResponse(CamelModel):
    success: bool = True
    message: str = "Payment verified successfully"
    order_id: str


class WebhookAck(CamelModel):
    received: bool = True


class RefundRequest(CamelModel):
    reason: str = Field(..., min_length=MIN_REFUND_REASON_LENGTH, max_length=1000)


class RefundDTO(CamelModel):
    id: str
    order_id: str
    amount: Decimal
    currency: str
    reason: str
    status: RefundStatus
    created_at: datetime
    processed_at: Optional[datetime] = None
    processed_by: Optional[str] = None
    notes: Optional[str] = None

    @classmethod
    def from_entity(cls, refund: Refund) -> "RefundDTO":
        return cls(
            id=refund.id,
            order_id=refund.order_id,
            amount=refund.amount.amount,
            currency=refund.amount.currency,
            reason=refund.reason,
            status=refund.status,
            created_at=refund.created_at,
            processed_at=refund.processed_at,
            processed_by=refund.processed_by,
            notes=refund.notes,
        )


class RefundResponse(CamelModel):
    message: str = "Refund request submitted successfully"
    refund: RefundDTO


class RefundLookupDTO(CamelModel):
    refund: Optional[RefundDTO] = None


class ProcessRefundRequest(CamelModel):
    """Admin decision on a pending refund."""

    action: Literal["APPROVE", "REJECT"]
    notes: Optional[str] = Field(default=None, max_length=1000)


class ProcessRefundResponse(CamelModel):
    message: str
    refund: RefundDTO
