"""SQLAlchemy implementation of NotificationRepository."""

from typing import List, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from core.domain.entities import Notification, NotificationDraft
from core.domain.repositories import NotificationRepository

from ..mappers import NotificationMapper
from ..models import NotificationModel


class SqlAlchemyNotificationRepository(NotificationRepository):
    """Concrete implementation of NotificationRepository using SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, draft: NotificationDraft) -> Notification:
        model = NotificationModel(
            user_id=draft.user_id,
            title=draft.title,
            message=draft.message,
            type=draft.type.value,
            link=draft.link,
            is_read=False,
        )
        self._session.add(model)
        await self._session.flush()
        return NotificationMapper.to_domain(model)

    async def find_for_user(self, notification_id: str, user_id: str) -> Optional[Notification]:
        result = await self._session.execute(
            select(NotificationModel).where(
                NotificationModel.id == notification_id,
                NotificationModel.user_id == user_id,
            )
        )
        model = result.scalar_one_or_none()
        return NotificationMapper.to_domain(model) if model else None

    async def list_for_user(
        self,
        user_id: str,
        unread_only: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Notification]:
        query = select(NotificationModel).where(NotificationModel.user_id == user_id)
        if unread_only:
            query = query.where(NotificationModel.is_read.is_(False))

        result = await self._session.execute(
            query.order_by(NotificationModel.created_at.desc()).limit(limit).offset(offset)
        )
        return [NotificationMapper.to_domain(model) for model in result.scalars().all()]

    async def count_for_user(self, user_id: str, unread_only: bool = False) -> int:
        query = select(func.count()).select_from(NotificationModel).where(
            NotificationModel.user_id == user_id
        )
        if unread_only:
            query = query.where(NotificationModel.is_read.is_(False))

        result = await self._session.execute(query)
        return result.scalar_one()

    async def mark_read(self, notification_id: str, is_read: bool = True) -> None:
        await self._session.execute(
            update(NotificationModel)
            .where(NotificationModel.id == notification_id)
            .values(is_read=is_read)
        )

    async def mark_all_read(self, user_id: str) -> int:
        result = await self._session.execute(
            update(NotificationModel)
            .where(NotificationModel.user_id == user_id, NotificationModel.is_read.is_(False))
            .values(is_read=True)
        )
        return result.rowcount or 0

    async def delete(self, notification_id: str) -> None:
        await self._session.execute(
            delete(NotificationModel).where(NotificationModel.id == notification_id)
        )
