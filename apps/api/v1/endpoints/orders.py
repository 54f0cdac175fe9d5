"""Order endpoints for REST API."""

import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, Query

from core.application.dtos import (
    AdminOrderUpdateRequest,
    CancelOrderRequest,
    CancelOrderResponse,
    OrderDTO,
    OrderHistoryDTO,
    OrderListDTO,
    RefundLookupDTO,
    RefundRequest,
    RefundResponse,
)
from core.application.services import OrderLifecycleService, RefundService
from core.domain.value_objects import Caller

from apps.api.deps import get_order_service, get_refund_service, rate_limited

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("", response_model=OrderListDTO)
async def list_orders(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    caller: Caller = Depends(rate_limited("api")),
    service: OrderLifecycleService = Depends(get_order_service),
) -> OrderListDTO:
    """List the caller's orders, newest first."""
    return await service.list_orders(caller, page=page, limit=limit)


@router.get("/{order_id}", response_model=OrderDTO)
async def get_order(
    order_id: str,
    caller: Caller = Depends(rate_limited("api")),
    service: OrderLifecycleService = Depends(get_order_service),
) -> OrderDTO:
    """Get one order (owner or admin)."""
    return await service.get_order(order_id, caller)


@router.patch("/{order_id}", response_model=OrderDTO)
async def update_order(
    order_id: str,
    request: AdminOrderUpdateRequest,
    caller: Caller = Depends(rate_limited("api")),
    service: OrderLifecycleService = Depends(get_order_service),
) -> OrderDTO:
    """Administrative override of status, tracking number and notes.

    Args:
        order_id: Order id
        request: Fields to change; omitted fields are left as they are
        caller: Authenticated caller (must be an admin)
        service: OrderLifecycleService instance

    Returns:
        Updated order
    """
    return await service.admin_transition(
        order_id,
        caller,
        status=request.status,
        tracking_number=request.tracking_number,
        notes=request.notes,
    )


@router.post("/{order_id}/cancel", response_model=CancelOrderResponse)
async def cancel_order(
    order_id: str,
    request: Optional[CancelOrderRequest] = Body(default=None),
    caller: Caller = Depends(rate_limited("strict")),
    service: OrderLifecycleService = Depends(get_order_service),
) -> CancelOrderResponse:
    """Cancel an own PENDING or PROCESSING order."""
    reason = request.reason if request else None
    order = await service.cancel(order_id, caller, reason=reason)
    return CancelOrderResponse(order=order)


@router.get("/{order_id}/history", response_model=OrderHistoryDTO)
async def get_order_history(
    order_id: str,
    caller: Caller = Depends(rate_limited("api")),
    service: OrderLifecycleService = Depends(get_order_service),
) -> OrderHistoryDTO:
    """Status trail of an own order, oldest first."""
    return await service.get_history(order_id, caller)


@router.post("/{order_id}/refund", response_model=RefundResponse, status_code=201)
async def request_refund(
    order_id: str,
    request: RefundRequest,
    caller: Caller = Depends(rate_limited("strict")),
    service: RefundService = Depends(get_refund_service),
) -> RefundResponse:
    """Request a refund for a paid order."""
    return await service.request_refund(order_id, caller, reason=request.reason)


@router.get("/{order_id}/refund", response_model=RefundLookupDTO)
async def get_refund(
    order_id: str,
    caller: Caller = Depends(rate_limited("api")),
    service: RefundService = Depends(get_refund_service),
) -> RefundLookupDTO:
    """Refund of an own order, or null."""
    return await service.get_refund(order_id, caller)
