"""Notification inbox endpoints for REST API."""

from typing import Optional

from fastapi import APIRouter, Body, Depends, Query

from core.application.dtos import MarkReadRequest, MessageDTO, NotificationDTO, NotificationListDTO
from core.application.services import NotificationInboxService
from core.domain.value_objects import Caller

from apps.api.deps import get_inbox_service, rate_limited

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.get("", response_model=NotificationListDTO)
async def list_notifications(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    unread_only: bool = Query(default=False, alias="unreadOnly"),
    caller: Caller = Depends(rate_limited("api")),
    service: NotificationInboxService = Depends(get_inbox_service),
) -> NotificationListDTO:
    return await service.list_notifications(caller, page=page, limit=limit, unread_only=unread_only)


@router.post("/mark-all-read", response_model=MessageDTO, response_model_exclude_none=True)
async def mark_all_read(
    caller: Caller = Depends(rate_limited("api")),
    service: NotificationInboxService = Depends(get_inbox_service),
) -> MessageDTO:
    return await service.mark_all_read(caller)


@router.patch("/{notification_id}", response_model=NotificationDTO)
async def mark_read(
    notification_id: str,
    request: Optional[MarkReadRequest] = Body(default=None),
    caller: Caller = Depends(rate_limited("api")),
    service: NotificationInboxService = Depends(get_inbox_service),
) -> NotificationDTO:
    """Mark one notification read (body `{"isRead": false}` marks it unread)."""
    return await service.mark_read(notification_id, caller, is_read=request.is_read if request else True)


@router.delete("/{notification_id}", response_model=MessageDTO, response_model_exclude_none=True)
async def delete_notification(
    notification_id: str,
    caller: Caller = Depends(rate_limited("api")),
    service: NotificationInboxService = Depends(get_inbox_service),
) -> MessageDTO:
    return await service.delete(notification_id, caller)
