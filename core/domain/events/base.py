"""
Base Domain Event.

All domain events inherit from this base class.
Aggregates collect events while they change; the application layer
drains them after persisting the aggregate.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
import uuid

from ..value_objects import utc_now


@dataclass
class DomainEvent:
    """
    Base class for all domain events.

    Events are immutable records of things that have happened.
    They capture state changes in the system.
    """

    # Event metadata
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    event_type: str = field(init=False)

    # Aggregate information
    aggregate_id: str = field(default="")

    # Who caused the change (user id), if known
    actor_id: Optional[str] = None

    # Timestamp
    occurred_at: datetime = field(default_factory=utc_now)

    def __post_init__(self):
        """Set event type from class name."""
        if not hasattr(self, 'event_type') or not self.event_type:
            object.__setattr__(self, 'event_type', self.__class__.__name__)
