"""Admin endpoints for REST API."""

import logging

from fastapi import APIRouter, Depends

from core.application.dtos import ProcessRefundRequest, ProcessRefundResponse
from core.application.services import RefundService
from core.domain.value_objects import Caller

from apps.api.deps import get_refund_service, rate_limited

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/admin", tags=["admin"])


@router.patch("/refunds/{refund_id}", response_model=ProcessRefundResponse)
async def process_refund(
    refund_id: str,
    request: ProcessRefundRequest,
    caller: Caller = Depends(rate_limited("api")),
    service: RefundService = Depends(get_refund_service),
) -> ProcessRefundResponse:
    """Approve or reject a pending refund request.

    Args:
        refund_id: Refund id
        request: `APPROVE` or `REJECT`, with optional notes for the history
    """
    return await service.process_refund(
        refund_id,
        caller,
        approve=request.action == "APPROVE",
        notes=request.notes,
    )
