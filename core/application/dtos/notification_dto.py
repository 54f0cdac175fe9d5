"""Application DTOs for the notification inbox."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from core.domain.entities import Notification
from core.domain.enums import NotificationType

from .order_dto import CamelModel, PaginationDTO


class NotificationDTO(CamelModel):
    id: str
    user_id: str
    title: str
    message: str
    type: NotificationType
    link: Optional[str] = None
    is_read: bool = False
    created_at: datetime

    @classmethod
    def from_entity(cls, notification: Notification) -> "NotificationDTO":
        return cls(
            id=notification.id,
            user_id=notification.user_id,
            title=notification.title,
            message=notification.message,
            type=notification.type,
            link=notification.link,
            is_read=notification.is_read,
            created_at=notification.created_at,
        )


class NotificationListDTO(CamelModel):
    notifications: List[NotificationDTO] = Field(default_factory=list)
    unread_count: int
    pagination: PaginationDTO


class MarkReadRequest(CamelModel):
    is_read: bool = True


class MessageDTO(CamelModel):
    message: str
    count: Optional[int] = None
