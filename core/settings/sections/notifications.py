from pydantic import Field

from core.settings.base import StorefrontBaseSettings


class NotificationSettings(StorefrontBaseSettings):
    """
    In-app notification settings.

    best_effort=True: a failed notification write is logged and does not
    undo the order transition that triggered it.
    """

    best_effort: bool = Field(default=True, alias="NOTIFICATIONS_BEST_EFFORT")
