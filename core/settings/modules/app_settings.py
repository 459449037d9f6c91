from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from core.settings.modules.database_settings import DatabaseSettings
from core.settings.modules.messaging_settings import MessagingSettings
from core.settings.modules.server_settings import ServerSettings


class AppSettings(BaseModel):
    """Application settings aggregator."""

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="ignore")

    database: DatabaseSettings
    messaging: MessagingSettings
    server: ServerSettings


@lru_cache()
def get_app_settings() -> AppSettings:
    return AppSettings(
        database=DatabaseSettings(),
        messaging=MessagingSettings(),
        server=ServerSettings(),
    )
