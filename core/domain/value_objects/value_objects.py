"""Domain value objects - pure Python immutable types."""

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional
from uuid import UUID, uuid4


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Money:
    """
    Immutable monetary value with currency.

    CRITICAL: Always use Decimal, never float!
    """
    amount: Decimal
    currency: str = "INR"

    def __post_init__(self):
        # Convert to Decimal if needed
        if not isinstance(self.amount, Decimal):
            object.__setattr__(self, 'amount', Decimal(str(self.amount)))

        # Validate currency code (3 letters)
        if not isinstance(self.currency, str) or len(self.currency) != 3:
            raise ValueError(
                f"Currency must be 3-letter ISO code, got: {self.currency}"
            )

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def to_minor_units(self) -> int:
        """
        Convert to the smallest currency unit (paise for INR).

        Payment gateways only accept integer minor units, so the amount is
        multiplied by 100 and rounded half-up to the nearest integer.

        Example:
            Money(Decimal("149.50")).to_minor_units() == 14950
        """
        minor = (self.amount * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        return int(minor)


@dataclass(frozen=True)
class ExecutionID:
    """Unique identifier for request tracing across a unit of work."""

    value: UUID

    @classmethod
    def generate(cls) -> "ExecutionID":
        """Generate a new ExecutionID."""
        return cls(value=uuid4())

    def __str__(self) -> str:
        """Return string representation."""
        return str(self.value)


@dataclass(frozen=True)
class Caller:
    """Identity of the user behind a request, as resolved from its credentials."""

    user_id: str
    role: str = "CUSTOMER"
    email: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.role == "ADMIN"


# Import here for backward compatibility
from .order_number import OrderNumber
