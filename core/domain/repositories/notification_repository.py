"""Repository interface for Notifications."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities import Notification, NotificationDraft


class NotificationRepository(ABC):
    """Abstract repository for Notification persistence."""

    @abstractmethod
    async def create(self, draft: NotificationDraft) -> Notification:
        """Write one notification (unread).

        Args:
            draft: Notification fields

        Returns:
            The persisted notification
        """
        pass

    @abstractmethod
    async def find_for_user(self, notification_id: str, user_id: str) -> Optional[Notification]:
        """Notification by id, only if it belongs to the user."""
        pass

    @abstractmethod
    async def list_for_user(
        self,
        user_id: str,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Notification]:
        """A page of the user's notifications, newest first."""
        pass

    @abstractmethod
    async def count_for_user(self, user_id: str, unread_only: bool = False) -> int:
        """Count the user's notifications."""
        pass

    @abstractmethod
    async def mark_read(self, notification_id: str, is_read: bool = True) -> None:
        """Set the read flag of one notification."""
        pass

    @abstractmethod
    async def mark_all_read(self, user_id: str) -> int:
        """Mark every unread notification of the user read.

        Returns:
            Number of notifications updated
        """
        pass

    @abstractmethod
    async def delete(self, notification_id: str) -> None:
        """Delete one notification."""
        pass
