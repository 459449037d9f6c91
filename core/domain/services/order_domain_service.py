"""
Order Domain Service.

Orchestrates lifecycle use cases against the repository:
load -> mutate -> save, one round trip each.
"""
import logging
from typing import Callable, List, Optional, Sequence

from ..entities.order import Order
from ..errors import DomainError
from ..events.order_events import OrderCreatedEvent
from ..id_generator import IdGenerator, default_id_generator
from ..repositories.order_repository import OrderRepository
from ..value_objects import OrderItem


logger = logging.getLogger(__name__)


class OrderDomainService:
    """
    Domain service for order lifecycle transitions.

    Responsibilities:
    - Build new orders and return the creation event
    - Load, transition and persist existing orders
    - Propagate DomainError (NOT_FOUND, INVALID_STATE) unchanged

    Publishing the creation event is the caller's job.
    """

    def __init__(
        self,
        order_repository: OrderRepository,
        id_generator: Optional[IdGenerator] = None,
    ) -> None:
        """Initialize order domain service.

        Args:
            order_repository: Persistence abstraction for orders
            id_generator: Identifier generator for new orders
        """
        self._orders = order_repository
        self._id_generator = id_generator or default_id_generator()

    async def create_order(
        self, customer_id: str, items: Sequence[OrderItem]
    ) -> OrderCreatedEvent:
        """Create, persist and announce a new PENDING order.

        Args:
            customer_id: Customer placing the order
            items: Line items (at least one)

        Returns:
            OrderCreatedEvent for the new order

        Raises:
            DomainError: INVALID_ARGUMENT for empty items or invalid data
        """
        if not items:
            raise DomainError.invalid_argument("Order must contain at least one item")

        order = Order(customer_id=customer_id, order_id=self._id_generator.generate())
        for item in items:
            order.add_item(item)

        await self._orders.save(order)

        logger.info(
            f"Order created: {order.id} (customer: {customer_id}, "
            f"items: {len(order.items)}, total: {order.total_amount})"
        )
        return OrderCreatedEvent.from_order(order)

    async def confirm_order(self, order_id: str) -> Order:
        return await self._transition(order_id, Order.confirm)

    async def cancel_order(self, order_id: str) -> Order:
        return await self._transition(order_id, Order.cancel)

    async def deliver_order(self, order_id: str) -> Order:
        return await self._transition(order_id, Order.deliver)

    async def get_order(self, order_id: str) -> Order:
        """Load an order; NOT_FOUND if absent."""
        return await self._orders.find_by_id(order_id)

    async def get_customer_orders(self, customer_id: str) -> List[Order]:
        """All orders of a customer; empty list if none."""
        return await self._orders.find_by_customer_id(customer_id)

    async def _transition(self, order_id: str, operation: Callable[[Order], None]) -> Order:
        order = await self._orders.find_by_id(order_id)
        previous_status = order.status

        operation(order)

        await self._orders.save(order)
        logger.info(
            f"Order {order.id} transitioned: {previous_status.value} -> {order.status.value}"
        )
        return order
