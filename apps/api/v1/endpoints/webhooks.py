"""Gateway webhook endpoint (unauthenticated, signature-checked)."""

from typing import Optional

from fastapi import APIRouter, Depends, Header, Request

from core.application.dtos import WebhookAck
from core.application.services import PaymentCoordinator

from apps.api.deps import get_payment_coordinator

router = APIRouter(prefix="/webhooks", tags=["webhooks"])


@router.post("/razorpay", response_model=WebhookAck)
async def razorpay_webhook(
    request: Request,
    x_razorpay_signature: Optional[str] = Header(default=None),
    coordinator: PaymentCoordinator = Depends(get_payment_coordinator),
) -> WebhookAck:
    """Reconcile payment.captured / payment.failed events.

    The signature covers the raw body, so the body is read unparsed.
    """
    body = await request.body()
    await coordinator.handle_webhook(body, x_razorpay_signature)
    return WebhookAck()
