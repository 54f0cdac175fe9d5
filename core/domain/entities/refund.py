"""Refund entity."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..enums import RefundStatus
from ..errors import ValidationFailed
from ..value_objects import Money, utc_now


MIN_REFUND_REASON_LENGTH = 10


@dataclass
class Refund:
    """Customer refund request for a paid order (at most one per order)."""
    id: str
    order_id: str
    amount: Money
    reason: str
    status: RefundStatus = RefundStatus.PENDING
    created_at: datetime = field(default_factory=utc_now)
    processed_at: Optional[datetime] = None
    processed_by: Optional[str] = None
    notes: Optional[str] = None

    @property
    def is_pending(self) -> bool:
        return self.status == RefundStatus.PENDING

    def process(self, approve: bool, admin_id: str, notes: Optional[str] = None) -> None:
        """
        Record an admin decision on a pending request.

        Raises:
            ValidationFailed: If the refund was already approved or rejected
        """
        if not self.is_pending:
            raise ValidationFailed("Refund has already been processed")

        self.status = RefundStatus.APPROVED if approve else RefundStatus.REJECTED
        self.processed_at = utc_now()
        self.processed_by = admin_id
        self.notes = notes
