"""
Database configuration.

Manages engine creation and the async session factory.
"""
import logging
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from core.settings import DatabaseSettings, get_app_settings


logger = logging.getLogger(__name__)


# =============================================================================
# ENGINE CREATION
# =============================================================================

def create_engine(settings: Optional[DatabaseSettings] = None) -> AsyncEngine:
    """
    Create async SQLAlchemy engine.

    Args:
        settings: Database settings (defaults to application settings)

    Returns:
        Configured async engine
    """
    settings = settings or get_app_settings().database
    logger.info(f"Creating database engine: {settings.database_url}")

    engine_kwargs = {"echo": settings.echo_sql}
    if settings.database_url.startswith("sqlite"):
        engine_kwargs["connect_args"] = {"check_same_thread": False}
    else:
        engine_kwargs["pool_pre_ping"] = True  # Test connections before using

    return create_async_engine(settings.database_url, **engine_kwargs)


# Global engine instance
engine: Optional[AsyncEngine] = None


def get_engine() -> AsyncEngine:
    """
    Get or create global engine instance.

    Returns:
        Global async engine
    """
    global engine

    if engine is None:
        engine = create_engine()

    return engine


# =============================================================================
# SESSION FACTORY
# =============================================================================

def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Get session factory.

    Returns:
        Session factory for creating sessions
    """
    return async_sessionmaker(
        bind=get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Get database session (generator).

    Yields:
        Async database session
    """
    factory = get_session_factory()
    async with factory() as session:
        yield session


# =============================================================================
# DATABASE INITIALIZATION
# =============================================================================

async def init_database() -> None:
    """
    Initialize database.

    Creates all tables if they don't exist.
    """
    from core.data.models import Base

    logger.info("Initializing database...")

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database initialized successfully")


async def close_database() -> None:
    """Close database connections."""
    global engine

    if engine:
        logger.info("Closing database connections...")
        await engine.dispose()
        engine = None
        logger.info("Database connections closed")
