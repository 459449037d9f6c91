from __future__ import annotations

from pydantic_settings import SettingsConfigDict

from core.settings.base import OrderServiceBaseSettings


class MessagingSettings(OrderServiceBaseSettings):
    """
    Outbound event settings (Redis Streams).

    When disabled, events are only logged by InMemoryEventPublisher.
    """

    model_config = SettingsConfigDict(
        env_prefix="REDIS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    enabled: bool = False
    url: str = "redis://localhost:6379/0"
    order_stream: str = "orders"
    maxlen: int = 10000
