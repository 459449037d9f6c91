"""
FastAPI Dependencies.

Provides dependency injection for the domain service, use cases and adapters.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import AsyncGenerator, Optional

from dotenv import load_dotenv
from fastapi import Depends

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from core.application.interfaces import IEventPublisher
from core.application.use_cases.create_order import CreateOrderUseCase
from core.data.repositories.order_repository_impl import SqlAlchemyOrderRepository
from core.domain.id_generator import IdGenerator, UUIDGenerator
from core.domain.repositories.order_repository import OrderRepository
from core.domain.services.order_domain_service import OrderDomainService
from core.infrastructure.adapters.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)
from core.infrastructure.bus.in_memory_publisher import InMemoryEventPublisher
from core.infrastructure.bus.redis_stream_publisher import RedisStreamPublisher
from core.infrastructure.database.config import get_session_factory
from core.settings import get_app_settings

logger = logging.getLogger(__name__)


# =============================================================================
# SINGLETON INSTANCES
# =============================================================================

_in_memory_repository: Optional[InMemoryOrderRepository] = None
_event_publisher: Optional[IEventPublisher] = None
_id_generator: Optional[IdGenerator] = None


# =============================================================================
# DEPENDENCIES
# =============================================================================

def get_id_generator() -> IdGenerator:
    global _id_generator
    if _id_generator is None:
        _id_generator = UUIDGenerator()
    return _id_generator


async def get_order_repository() -> AsyncGenerator[OrderRepository, None]:
    """Request-scoped repository: one SQL session per request, or the shared in-memory store."""
    global _in_memory_repository

    settings = get_app_settings()
    if settings.database.backend == "sql":
        factory = get_session_factory()
        async with factory() as session:
            yield SqlAlchemyOrderRepository(session)
        return

    if _in_memory_repository is None:
        _in_memory_repository = InMemoryOrderRepository()
        logger.info("Created InMemoryOrderRepository instance")
    yield _in_memory_repository


def get_order_domain_service(
    repository: OrderRepository = Depends(get_order_repository),
    id_generator: IdGenerator = Depends(get_id_generator),
) -> OrderDomainService:
    return OrderDomainService(order_repository=repository, id_generator=id_generator)


def get_event_publisher() -> IEventPublisher:
    global _event_publisher

    if _event_publisher is None:
        messaging = get_app_settings().messaging
        if messaging.enabled:
            _event_publisher = RedisStreamPublisher(
                redis_url=messaging.url,
                stream_name=messaging.order_stream,
                maxlen=messaging.maxlen,
            )
            logger.info(f"Created RedisStreamPublisher (stream: {messaging.order_stream})")
        else:
            _event_publisher = InMemoryEventPublisher()
            logger.info("Using InMemoryEventPublisher (Redis disabled)")

    return _event_publisher


def get_create_order_use_case(
    service: OrderDomainService = Depends(get_order_domain_service),
    publisher: IEventPublisher = Depends(get_event_publisher),
    id_generator: IdGenerator = Depends(get_id_generator),
) -> CreateOrderUseCase:
    return CreateOrderUseCase(
        order_domain_service=service,
        event_publisher=publisher,
        id_generator=id_generator,
    )


# =============================================================================
# RESET (for testing)
# =============================================================================

def reset_dependencies():
    global _in_memory_repository, _event_publisher, _id_generator

    _in_memory_repository = None
    _event_publisher = None
    _id_generator = None

    logger.info("Dependencies reset")
