"""
Create Order Use Case.

Flow:
1. Validate the request (before touching the domain)
2. Build OrderItem value objects
3. Create and persist the order through OrderDomainService
4. Hand the OrderCreated event to the publisher
"""
import logging
from typing import Optional

from core.application.dtos.order_dto import CreateOrderRequest
from core.application.interfaces import IEventPublisher
from core.domain.errors import DomainError
from core.domain.events.order_events import OrderCreatedEvent
from core.domain.id_generator import IdGenerator, default_id_generator
from core.domain.services.order_domain_service import OrderDomainService
from core.domain.value_objects import OrderItem


logger = logging.getLogger(__name__)


class CreateOrderUseCase:
    """
    Use case for placing a new order.

    Persistence and publishing are not atomic: if publishing fails the
    order is already saved and the error propagates to the caller.
    """

    def __init__(
        self,
        order_domain_service: OrderDomainService,
        event_publisher: Optional[IEventPublisher] = None,
        id_generator: Optional[IdGenerator] = None,
    ):
        """
        Initialize use case with dependencies.

        Args:
            order_domain_service: Domain service owning the order lifecycle
            event_publisher: Optional outbound publisher for OrderCreated
            id_generator: Identifier generator for new items
        """
        self._order_domain_service = order_domain_service
        self._event_publisher = event_publisher
        self._id_generator = id_generator or default_id_generator()

    async def execute(self, request: CreateOrderRequest) -> OrderCreatedEvent:
        """
        Execute the use case.

        Args:
            request: CreateOrderRequest DTO

        Returns:
            OrderCreatedEvent of the persisted order

        Raises:
            DomainError: INVALID_ARGUMENT when the request is malformed
        """
        self._validate(request)

        items = [
            OrderItem.create(
                product_id=item.product_id,
                quantity=item.quantity,
                unit_price=item.unit_price,
                id_generator=self._id_generator,
            )
            for item in request.items
        ]

        event = await self._order_domain_service.create_order(request.customer_id, items)

        if self._event_publisher is not None:
            try:
                await self._event_publisher.publish_order_created(event)
            except Exception as e:
                logger.error(
                    f"Order {event.order_id} saved but OrderCreated was not published: {e}",
                    exc_info=True,
                )
                raise

        return event

    @staticmethod
    def _validate(request: CreateOrderRequest) -> None:
        if not request.customer_id or not request.customer_id.strip():
            raise DomainError.invalid_argument("Customer ID is required")

        if not request.items:
            raise DomainError.invalid_argument("Order must contain at least one item")

        for item in request.items:
            if not item.product_id or not item.product_id.strip():
                raise DomainError.invalid_argument("Product ID is required for each item")
            if item.quantity is None or item.quantity <= 0:
                raise DomainError.invalid_argument(
                    "Quantity must be greater than zero for each item"
                )
            if item.unit_price is None or item.unit_price <= 0:
                raise DomainError.invalid_argument(
                    "Unit price must be greater than zero for each item"
                )
