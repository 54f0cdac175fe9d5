"""SQLAlchemy ORM model for notifications."""

from sqlalchemy import Boolean, Column, DateTime, Index, String, Text

from core.domain.value_objects import utc_now

from .base import Base, new_id


class NotificationModel(Base):
    """SQLAlchemy ORM model for notifications table."""

    __tablename__ = "notifications"

    id = Column(String(36), primary_key=True, default=new_id)
    user_id = Column(String(36), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    type = Column(String(20), nullable=False, default="ORDER")
    link = Column(String(500), nullable=True)
    is_read = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=utc_now, nullable=False)

    __table_args__ = (
        Index("ix_notifications_user_read", "user_id", "is_read"),
    )
