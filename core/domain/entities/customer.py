"""Customer contact snapshot source."""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Customer:
    """The parts of a user profile the order flow reads."""
    id: str
    email: str
    name: Optional[str] = None
    phone: Optional[str] = None
