"""Message bus infrastructure - outbound event publishers."""
from .in_memory_publisher import InMemoryEventPublisher
from .redis_stream_publisher import RedisStreamPublisher

__all__ = [
    "InMemoryEventPublisher",
    "RedisStreamPublisher",
]
