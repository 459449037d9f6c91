"""Application layer interfaces."""
from abc import ABC, abstractmethod
from typing import Optional

from core.domain.events.order_events import OrderCreatedEvent


class IEventPublisher(ABC):
    """
    Interface for outbound integration events.

    The domain only produces events; implementations hand them to a
    transport (Redis Streams, in-memory log, ...).
    """

    @abstractmethod
    async def publish_order_created(self, event: OrderCreatedEvent) -> Optional[str]:
        """
        Publish an OrderCreated event.

        Args:
            event: Event returned by OrderDomainService.create_order

        Returns:
            Transport message id, if the transport assigns one

        Raises:
            Exception: Transport failures propagate unchanged
        """
        pass


__all__ = ["IEventPublisher"]
