"""Repository interface for Payment records."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities import Payment


class PaymentRepository(ABC):
    """Abstract repository for Payment persistence."""

    @abstractmethod
    async def find_by_order(self, order_id: str) -> Optional[Payment]:
        """Payment of an order, if one exists (1:1)."""
        pass

    @abstractmethod
    async def find_by_gateway_order_id(self, gateway_order_id: str) -> Optional[Payment]:
        """Payment by the gateway-issued order reference."""
        pass

    @abstractmethod
    async def create(self, payment: Payment) -> Payment:
        """Insert a new payment record.

        Args:
            payment: Payment entity to persist

        Returns:
            The persisted payment
        """
        pass

    @abstractmethod
    async def update(self, payment: Payment) -> Payment:
        """Persist changes to an existing payment record."""
        pass
