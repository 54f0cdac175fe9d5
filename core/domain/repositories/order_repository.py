"""Repository interfaces for the Order aggregate and its status trail."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities import Order, OrderStatusHistoryEntry
from ..enums import OrderStatus


class OrderRepository(ABC):
    """Abstract repository for Order aggregate persistence."""

    @abstractmethod
    async def find_by_id(self, order_id: str) -> Optional[Order]:
        """Retrieve order by unique identifier.

        Args:
            order_id: Order id

        Returns:
            Order if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_for_user(self, user_id: str, limit: int = 10, offset: int = 0) -> List[Order]:
        """List a user's orders, newest first.

        Args:
            user_id: Owner id
            limit: Maximum number of orders to return
            offset: Number of orders to skip

        Returns:
            List of Order aggregates
        """
        pass

    @abstractmethod
    async def count_for_user(self, user_id: str) -> int:
        """Count a user's orders."""
        pass

    @abstractmethod
    async def update(self, order: Order) -> Order:
        """Persist the mutable fields of an existing order.

        Args:
            order: Order aggregate with changes applied

        Returns:
            The same order
        """
        pass

    @abstractmethod
    async def append_history(
        self,
        order_id: str,
        status: OrderStatus,
        notes: Optional[str],
        created_by: Optional[str] = None,
    ) -> OrderStatusHistoryEntry:
        """Append one row to the order's status trail (append-only).

        Args:
            order_id: Order id
            status: Status recorded by the row
            notes: Free-text note
            created_by: Id of the user who caused the change

        Returns:
            The written history entry
        """
        pass

    @abstractmethod
    async def list_history(self, order_id: str) -> List[OrderStatusHistoryEntry]:
        """Status trail ordered by creation time ascending."""
        pass
