"""
Redis Streams Publisher for outbound order events.

Publishes OrderCreated events to a Redis Stream.
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import redis.asyncio as aioredis

from core.application.interfaces import IEventPublisher
from core.domain.events.order_events import OrderCreatedEvent


logger = logging.getLogger(__name__)


class RedisStreamPublisher(IEventPublisher):
    """
    Publishes events to Redis Streams.

    Stream format: orders
    Message format: {
        "event_id": str,
        "event_type": str,
        "order_id": str,   # message key
        "payload": str,    # event JSON
        "timestamp": str,  # ISO format
    }
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379/0",
        stream_name: str = "orders",
        maxlen: int = 10000,
    ):
        """
        Initialize Redis Stream Publisher.

        Args:
            redis_url: Redis connection URL
            stream_name: Redis Stream name
            maxlen: Approximate cap on stream length
        """
        self.redis_url = redis_url
        self.stream_name = stream_name
        self.maxlen = maxlen
        self._redis_client: Optional[aioredis.Redis] = None

    async def connect(self) -> None:
        """Establish Redis connection."""
        if self._redis_client is None:
            try:
                self._redis_client = aioredis.from_url(
                    self.redis_url,
                    encoding="utf-8",
                    decode_responses=True
                )
                await self._redis_client.ping()
                logger.info(f"Connected to Redis: {self.redis_url}")
            except Exception as e:
                self._redis_client = None
                logger.error(f"Failed to connect to Redis: {e}")
                raise

    async def disconnect(self) -> None:
        """Close Redis connection."""
        if self._redis_client:
            await self._redis_client.aclose()
            self._redis_client = None
            logger.info("Disconnected from Redis")

    async def publish_order_created(self, event: OrderCreatedEvent) -> str:
        """
        Publish OrderCreated event to Redis Stream.

        Args:
            event: Event returned by OrderDomainService.create_order

        Returns:
            Message ID from Redis Stream
        """
        if self._redis_client is None:
            await self.connect()

        message: Dict[str, Any] = {
            "event_id": event.event_id,
            "event_type": event.event_type,
            "order_id": event.order_id,
            "payload": event.to_json(),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

        try:
            msg_id = await self._redis_client.xadd(
                self.stream_name,
                message,
                maxlen=self.maxlen,
                approximate=True,
            )
        except Exception as e:
            logger.error(
                f"Failed to publish {event.event_type} for order {event.order_id}: {e}",
                exc_info=True
            )
            raise

        logger.info(
            f"Published {event.event_type}: order={event.order_id}, "
            f"stream={self.stream_name}, msg_id={msg_id}"
        )
        return msg_id

    async def __aenter__(self):
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.disconnect()
