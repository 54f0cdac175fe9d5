"""Payment endpoints for REST API."""

from fastapi import APIRouter, Depends

from core.application.dtos import (
    CreatePaymentRequest,
    PaymentIntentDTO,
    VerifyPaymentRequest,
    VerifyPaymentResponse,
)
from core.application.services import PaymentCoordinator
from core.domain.value_objects import Caller

from apps.api.deps import get_payment_coordinator, rate_limited

router = APIRouter(prefix="/payments", tags=["payments"])


@router.post("/create", response_model=PaymentIntentDTO)
async def create_payment(
    request: CreatePaymentRequest,
    caller: Caller = Depends(rate_limited("strict")),
    coordinator: PaymentCoordinator = Depends(get_payment_coordinator),
) -> PaymentIntentDTO:
    """Create a Razorpay order for an unpaid order.

    Returns:
        Gateway order id, amount in minor units, currency and public key id
    """
    return await coordinator.create_payment_intent(request.order_id, caller)


@router.post("/verify", response_model=VerifyPaymentResponse)
async def verify_payment(
    request: VerifyPaymentRequest,
    caller: Caller = Depends(rate_limited("api")),
    coordinator: PaymentCoordinator = Depends(get_payment_coordinator),
) -> VerifyPaymentResponse:
    """Confirm a payment from the checkout handoff."""
    return await coordinator.verify_payment(
        gateway_order_id=request.razorpay_order_id,
        gateway_payment_id=request.razorpay_payment_id,
        signature=request.razorpay_signature,
        caller=caller,
    )
