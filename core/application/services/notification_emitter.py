"""Notification emitter: writes inbox rows as a side effect of transitions."""

import logging
from typing import Optional

from core.data.uow import UnitOfWork
from core.domain.entities import Notification, NotificationDraft


logger = logging.getLogger(__name__)


class NotificationEmitter:
    """
    Write one notification inside the caller's Unit of Work.

    The insert runs in a SAVEPOINT after the order update and history
    append, so it is never visible before them. In best-effort mode a
    failed insert is rolled back to the savepoint and logged; the
    surrounding transition still commits. Otherwise the failure
    propagates and the whole Unit of Work rolls back.
    """

    def __init__(self, best_effort: bool = True) -> None:
        self.best_effort = best_effort

    async def emit(self, uow: UnitOfWork, draft: NotificationDraft) -> Optional[Notification]:
        try:
            async with uow.savepoint():
                notification = await uow.notifications.create(draft)
        except Exception as e:
            if not self.best_effort:
                raise
            logger.error(
                f"[{uow.execution_id}] Notification '{draft.title}' for user {draft.user_id} "
                f"was not written: {e!r}",
                exc_info=True,
            )
            return None

        logger.info(f"[{uow.execution_id}] Notification '{draft.title}' sent to user {draft.user_id}")
        return notification
