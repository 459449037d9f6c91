from __future__ import annotations

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from core.settings.base import OrderServiceBaseSettings


class ServerSettings(OrderServiceBaseSettings):
    """HTTP server settings."""

    model_config = SettingsConfigDict(
        env_prefix="SERVER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)
    log_level: str = "INFO"
