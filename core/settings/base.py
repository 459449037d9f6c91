# core/settings/base.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class OrderServiceBaseSettings(BaseSettings):
    """Common loading rules: environment first, then .env, unknown keys ignored."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )
