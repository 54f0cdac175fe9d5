"""Notification entity."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..enums import NotificationType
from ..value_objects import utc_now


@dataclass(frozen=True)
class NotificationDraft:
    """Fields of a notification that has not been written yet."""
    user_id: str
    title: str
    message: str
    type: NotificationType = NotificationType.ORDER
    link: Optional[str] = None


@dataclass
class Notification:
    """A message in a user's inbox."""
    id: str
    user_id: str
    title: str
    message: str
    type: NotificationType
    link: Optional[str] = None
    is_read: bool = False
    created_at: datetime = field(default_factory=utc_now)
