from __future__ import annotations

from typing import Literal

from pydantic_settings import SettingsConfigDict

from core.settings.base import OrderServiceBaseSettings


class DatabaseSettings(OrderServiceBaseSettings):
    """
    Persistence settings.

    DB_BACKEND=memory keeps orders in process (development, tests);
    DB_BACKEND=sql uses SQLAlchemy with DB_DATABASE_URL.
    """

    model_config = SettingsConfigDict(
        env_prefix="DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    backend: Literal["memory", "sql"] = "memory"
    database_url: str = "sqlite+aiosqlite:///./orders.db"
    echo_sql: bool = False
