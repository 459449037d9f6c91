"""
Test settings loading from the environment and .env file.

Each test runs from an empty temporary directory so a developer's
local .env cannot leak into the expectations.
"""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.settings import (
    DatabaseSettings,
    MessagingSettings,
    ServerSettings,
    get_app_settings,
)


_ENV_KEYS = [
    "DB_BACKEND", "DB_DATABASE_URL", "DB_ECHO_SQL",
    "REDIS_ENABLED", "REDIS_URL", "REDIS_ORDER_STREAM", "REDIS_MAXLEN",
    "SERVER_HOST", "SERVER_PORT", "SERVER_LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    get_app_settings.cache_clear()
    yield tmp_path
    get_app_settings.cache_clear()


def test_defaults():
    settings = get_app_settings()

    assert settings.database.backend == "memory"
    assert settings.database.database_url == "sqlite+aiosqlite:///./orders.db"
    assert settings.database.echo_sql is False
    assert settings.messaging.enabled is False
    assert settings.messaging.order_stream == "orders"
    assert settings.messaging.maxlen == 10000
    assert settings.server.port == 3000
    assert settings.server.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DB_BACKEND", "sql")
    monkeypatch.setenv("DB_DATABASE_URL", "postgresql+asyncpg://orders@db/orders")
    monkeypatch.setenv("REDIS_ENABLED", "true")
    monkeypatch.setenv("REDIS_ORDER_STREAM", "orders-staging")
    monkeypatch.setenv("SERVER_PORT", "8080")

    settings = get_app_settings()

    assert settings.database.backend == "sql"
    assert settings.database.database_url == "postgresql+asyncpg://orders@db/orders"
    assert settings.messaging.enabled is True
    assert settings.messaging.order_stream == "orders-staging"
    assert settings.server.port == 8080


def test_dotenv_file_is_read(isolated_env):
    (isolated_env / ".env").write_text(
        "DB_BACKEND=sql\nREDIS_MAXLEN=500\nSERVER_LOG_LEVEL=DEBUG\nUNRELATED_KEY=1\n",
        encoding="utf-8",
    )

    assert DatabaseSettings().backend == "sql"
    assert MessagingSettings().maxlen == 500
    assert ServerSettings().log_level == "DEBUG"


def test_settings_are_cached():
    assert get_app_settings() is get_app_settings()


@pytest.mark.parametrize(
    "key, value",
    [("DB_BACKEND", "mongo"), ("SERVER_PORT", "0"), ("SERVER_PORT", "70000")],
)
def test_invalid_values_are_rejected(monkeypatch, key, value):
    monkeypatch.setenv(key, value)

    with pytest.raises(ValidationError):
        get_app_settings()
