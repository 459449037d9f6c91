"""Pytest configuration and fixtures for integration tests."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from api.dependencies import get_event_publisher, get_order_repository, reset_dependencies
from api.main import app
from core.data.models.base import Base
from core.infrastructure.adapters.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)
from core.infrastructure.bus.in_memory_publisher import InMemoryEventPublisher


# Use in-memory SQLite for testing
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine):
    """Create test session factory."""
    session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )
    yield session_factory


@pytest_asyncio.fixture
async def test_session(test_session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def api_repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def api_publisher() -> InMemoryEventPublisher:
    return InMemoryEventPublisher()


@pytest.fixture
def test_client(api_repository, api_publisher) -> TestClient:
    """Create FastAPI test client backed by in-memory adapters."""
    app.dependency_overrides[get_order_repository] = lambda: api_repository
    app.dependency_overrides[get_event_publisher] = lambda: api_publisher

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()
    reset_dependencies()
