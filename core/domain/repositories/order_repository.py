"""Repository interfaces for Order aggregate."""

from abc import ABC, abstractmethod
from typing import List

from ..entities.order import Order


class OrderRepository(ABC):
    """
    Abstract repository for Order aggregate persistence.

    Implementations may be remote; every method is awaited. Loaded orders
    must be rebuilt through OrderRebuilder, never by field assignment.
    """

    @abstractmethod
    async def save(self, order: Order) -> None:
        """Insert or overwrite the order (last write wins).

        Args:
            order: Order aggregate to persist
        """
        pass

    @abstractmethod
    async def find_by_id(self, order_id: str) -> Order:
        """Retrieve order by unique identifier.

        Args:
            order_id: Order identifier

        Returns:
            Rebuilt Order

        Raises:
            DomainError: NOT_FOUND if no order has this id
        """
        pass

    @abstractmethod
    async def find_by_customer_id(self, customer_id: str) -> List[Order]:
        """List every order placed by a customer.

        Args:
            customer_id: Customer identifier

        Returns:
            List of Order aggregates (empty if none)
        """
        pass

    @abstractmethod
    async def delete(self, order_id: str) -> None:
        """Physically remove an order.

        Args:
            order_id: Order identifier

        Raises:
            DomainError: NOT_FOUND if no order has this id
        """
        pass

    @abstractmethod
    async def exists(self, order_id: str) -> bool:
        """Check if order exists.

        Args:
            order_id: Order identifier

        Returns:
            True if order exists, False otherwise
        """
        pass
