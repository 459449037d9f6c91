"""
In-Memory Order Repository Implementation.

Used for development and tests. Stores snapshots, not live aggregates,
so every load returns a freshly rebuilt Order.
"""
import copy
import logging
from typing import Any, Dict, List

from core.domain.entities.order import Order
from core.domain.entities.order_rebuilder import OrderRebuilder
from core.domain.errors import DomainError
from core.domain.repositories.order_repository import OrderRepository


logger = logging.getLogger(__name__)


class InMemoryOrderRepository(OrderRepository):
    """
    In-memory implementation of OrderRepository.

    Stores order snapshots in a dictionary keyed by order id.
    """

    def __init__(self):
        """Initialize empty storage."""
        self._storage: Dict[str, Dict[str, Any]] = {}
        logger.info("InMemoryOrderRepository initialized (in-memory storage)")

    async def save(self, order: Order) -> None:
        """
        Save order snapshot to in-memory storage.

        Args:
            order: Order entity to save
        """
        self._storage[order.id] = order.to_snapshot_dict()
        logger.debug(f"Order saved to memory: {order.id} (status: {order.status.value})")

    async def find_by_id(self, order_id: str) -> Order:
        """
        Get order by ID from in-memory storage.

        Args:
            order_id: Order ID to lookup

        Returns:
            Rebuilt Order

        Raises:
            DomainError: NOT_FOUND if absent
        """
        snapshot = self._storage.get(order_id)
        if snapshot is None:
            raise DomainError.not_found(f"Order with ID {order_id} not found")

        return OrderRebuilder.rebuild(snapshot)

    async def find_by_customer_id(self, customer_id: str) -> List[Order]:
        """
        Get every order of a customer, in insertion order.

        Args:
            customer_id: Customer identifier

        Returns:
            List of rebuilt orders (possibly empty)
        """
        return [
            OrderRebuilder.rebuild(snapshot)
            for snapshot in self._storage.values()
            if snapshot["customer_id"] == customer_id
        ]

    async def delete(self, order_id: str) -> None:
        """
        Delete order from in-memory storage.

        Args:
            order_id: Order ID to delete

        Raises:
            DomainError: NOT_FOUND if absent
        """
        if order_id not in self._storage:
            raise DomainError.not_found(f"Order with ID {order_id} not found")

        del self._storage[order_id]
        logger.info(f"Order deleted from memory: {order_id}")

    async def exists(self, order_id: str) -> bool:
        """
        Check if order exists in storage.

        Args:
            order_id: Order ID to check

        Returns:
            True if exists, False otherwise
        """
        return order_id in self._storage

    def put_snapshot(self, snapshot: Dict[str, Any]) -> None:
        """Store a raw snapshot as-is (seeding and tests)."""
        self._storage[snapshot["id"]] = copy.deepcopy(snapshot)

    def clear(self) -> None:
        """Clear all orders."""
        self._storage.clear()
        logger.info("In-memory order repository cleared")
