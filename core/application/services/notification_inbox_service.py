"""Recipient-side notification operations."""

import logging

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos import MessageDTO, NotificationDTO, NotificationListDTO, PaginationDTO
from core.data.uow import create_uow
from core.domain.errors import NotFound
from core.domain.value_objects import Caller


logger = logging.getLogger(__name__)


class NotificationInboxService:
    """List, mark read and delete the caller's own notifications."""

    def __init__(self, session_factory: async_sessionmaker) -> None:
        self._session_factory = session_factory

    async def list_notifications(
        self,
        caller: Caller,
        page: int = 1,
        limit: int = 20,
        unread_only: bool = False,
    ) -> NotificationListDTO:
        offset = (page - 1) * limit
        async with create_uow(self._session_factory) as uow:
            notifications = await uow.notifications.list_for_user(
                caller.user_id, unread_only=unread_only, limit=limit, offset=offset
            )
            total = await uow.notifications.count_for_user(caller.user_id, unread_only=unread_only)
            unread_count = await uow.notifications.count_for_user(caller.user_id, unread_only=True)

        return NotificationListDTO(
            notifications=[NotificationDTO.from_entity(n) for n in notifications],
            unread_count=unread_count,
            pagination=PaginationDTO.build(page=page, limit=limit, total=total),
        )

    async def mark_read(self, notification_id: str, caller: Caller, is_read: bool = True) -> NotificationDTO:
        """Mark one notification read (or unread again).

        Raises:
            NotFound: If the notification is missing or addressed to someone else
        """
        async with create_uow(self._session_factory) as uow:
            notification = await uow.notifications.find_for_user(notification_id, caller.user_id)
            if notification is None:
                raise NotFound("Notification not found")

            await uow.notifications.mark_read(notification.id, is_read=is_read)
            await uow.commit()

        notification.is_read = is_read
        return NotificationDTO.from_entity(notification)

    async def mark_all_read(self, caller: Caller) -> MessageDTO:
        async with create_uow(self._session_factory) as uow:
            count = await uow.notifications.mark_all_read(caller.user_id)
            await uow.commit()

        logger.info(f"Marked {count} notifications read for user {caller.user_id}")
        return MessageDTO(message="All notifications marked as read", count=count)

    async def delete(self, notification_id: str, caller: Caller) -> MessageDTO:
        async with create_uow(self._session_factory) as uow:
            notification = await uow.notifications.find_for_user(notification_id, caller.user_id)
            if notification is None:
                raise NotFound("Notification not found")

            await uow.notifications.delete(notification.id)
            await uow.commit()

        return MessageDTO(message="Notification deleted")
