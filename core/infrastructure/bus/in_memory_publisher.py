"""
In-Memory Event Publisher.

Logs events instead of sending them. Used when Redis is disabled and in tests.
"""
import json
import logging
from typing import Any, Dict, List

from core.application.interfaces import IEventPublisher
from core.domain.events.order_events import OrderCreatedEvent


logger = logging.getLogger(__name__)


class InMemoryEventPublisher(IEventPublisher):
    """
    Keeps every published payload in ``published``.
    """

    def __init__(self):
        self.published: List[Dict[str, Any]] = []
        logger.info("InMemoryEventPublisher initialized (console logging)")

    async def publish_order_created(self, event: OrderCreatedEvent) -> str:
        payload = json.loads(event.to_json())
        self.published.append(payload)

        logger.info(
            f"{event.event_type} recorded: order={event.order_id}, "
            f"customer={event.customer_id}, total={event.total_amount}"
        )
        return event.event_id

    def clear(self) -> None:
        self.published.clear()
