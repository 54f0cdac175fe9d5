"""Repository interfaces for refunds and customer contact data."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities import Customer, Refund


class RefundRepository(ABC):
    """Abstract repository for Refund persistence."""

    @abstractmethod
    async def find_by_order(self, order_id: str) -> Optional[Refund]:
        """Refund of an order, if one was requested."""
        pass

    @abstractmethod
    async def find_by_id(self, refund_id: str) -> Optional[Refund]:
        """Refund by id."""
        pass

    @abstractmethod
    async def create(self, refund: Refund) -> Refund:
        """Insert a new refund request."""
        pass

    @abstractmethod
    async def update(self, refund: Refund) -> Refund:
        """Persist a decision on an existing refund."""
        pass


class CustomerRepository(ABC):
    """Read-only access to customer contact details."""

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[Customer]:
        """Customer by user id."""
        pass
