# Settings modules
from .app_settings import AppSettings, get_app_settings
from .database_settings import DatabaseSettings
from .messaging_settings import MessagingSettings
from .server_settings import ServerSettings

__all__ = [
    "AppSettings",
    "get_app_settings",
    "DatabaseSettings",
    "MessagingSettings",
    "ServerSettings",
]
