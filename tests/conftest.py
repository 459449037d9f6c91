"""Shared fixtures for the order service test suite."""
from decimal import Decimal
from itertools import count

import pytest

from core.domain.id_generator import IdGenerator
from core.domain.services.order_domain_service import OrderDomainService
from core.domain.value_objects import OrderItem
from core.infrastructure.adapters.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)


class SequentialIdGenerator(IdGenerator):
    """Deterministic ids: <prefix>-1, <prefix>-2, ..."""

    def __init__(self, prefix: str = "id"):
        self._prefix = prefix
        self._counter = count(1)

    def generate(self) -> str:
        return f"{self._prefix}-{next(self._counter)}"


@pytest.fixture
def id_generator() -> SequentialIdGenerator:
    return SequentialIdGenerator("order")


@pytest.fixture
def repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def service(repository, id_generator) -> OrderDomainService:
    return OrderDomainService(order_repository=repository, id_generator=id_generator)


@pytest.fixture
def sample_item() -> OrderItem:
    return OrderItem(product_id="p1", quantity=2, unit_price=Decimal("10.00"))
