"""
Payment entity.

One Payment per Order; created only by the payment coordinator.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..enums import PaymentStatus
from ..value_objects import Money, utc_now


@dataclass
class Payment:
    """
    Local record of a gateway payment intent.

    `email` and `contact` are snapshots of the payer's profile taken when
    the intent was created, not live references.
    """
    id: str
    order_id: str
    gateway_order_id: str
    amount: Money
    status: PaymentStatus = PaymentStatus.PENDING
    email: Optional[str] = None
    contact: Optional[str] = None
    gateway_payment_id: Optional[str] = None
    gateway_signature: Optional[str] = None
    method: Optional[str] = None
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    @property
    def is_completed(self) -> bool:
        return self.status == PaymentStatus.COMPLETED

    def reissue(self, gateway_order_id: str, amount: Money, email: Optional[str], contact: Optional[str]) -> None:
        """Point an unfinished payment at a fresh gateway order (retried checkout)."""
        if self.is_completed:
            raise ValueError("Cannot reissue a completed payment")
        self.gateway_order_id = gateway_order_id
        self.amount = amount
        self.email = email
        self.contact = contact
        self.status = PaymentStatus.PENDING
        self.gateway_payment_id = None
        self.gateway_signature = None
        self.updated_at = utc_now()

    def complete(
        self,
        gateway_payment_id: Optional[str] = None,
        signature: Optional[str] = None,
        method: Optional[str] = None,
    ) -> None:
        if gateway_payment_id:
            self.gateway_payment_id = gateway_payment_id
        if signature:
            self.gateway_signature = signature
        if method:
            self.method = method
        self.status = PaymentStatus.COMPLETED
        self.updated_at = utc_now()

    def fail(self, gateway_payment_id: Optional[str] = None) -> None:
        if gateway_payment_id:
            self.gateway_payment_id = gateway_payment_id
        self.status = PaymentStatus.FAILED
        self.updated_at = utc_now()
