"""Order number value object."""
import secrets
import string
import time
from dataclasses import dataclass


_BASE36 = string.digits + string.ascii_uppercase


def _to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36[remainder])
    return "".join(reversed(digits))


@dataclass(frozen=True)
class OrderNumber:
    """
    Human-readable storefront order identifier.

    Format: ORG-<base36 timestamp>-<5 random chars>, upper case.
    Examples:
    - ORG-LX2K9Q1A-7F3KD
    - ORG-LX2KA0ZB-Q81MC
    """
    value: str

    PREFIX = "ORG"

    def __post_init__(self):
        if not self.value:
            raise ValueError("Order number cannot be empty")

        parts = self.value.split('-')
        if len(parts) != 3 or parts[0] != self.PREFIX:
            raise ValueError(
                f"Invalid order number format (expected ORG-XXXX-XXXXX): {self.value}"
            )

        if not all(part.isalnum() and part.upper() == part for part in parts[1:]):
            raise ValueError(
                f"Invalid order number format (non-alphanumeric parts): {self.value}"
            )

    @classmethod
    def generate(cls) -> "OrderNumber":
        """Generate a new order number from the current time and a random suffix."""
        timestamp = _to_base36(int(time.time() * 1000))
        suffix = "".join(secrets.choice(_BASE36) for _ in range(5))
        return cls(value=f"{cls.PREFIX}-{timestamp}-{suffix}")

    def __str__(self) -> str:
        return self.value
