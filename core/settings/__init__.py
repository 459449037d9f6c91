# Settings package
from core.settings.modules import (
    AppSettings,
    DatabaseSettings,
    MessagingSettings,
    ServerSettings,
    get_app_settings,
)

__all__ = [
    "get_app_settings",
    "AppSettings",
    "DatabaseSettings",
    "MessagingSettings",
    "ServerSettings",
]
