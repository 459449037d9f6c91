"""Tests for InMemoryOrderRepository."""
from decimal import Decimal

import pytest

from core.domain.entities.order import Order
from core.domain.errors import DomainError, DomainErrorKind
from core.domain.value_objects import OrderItem, OrderStatus


def _order(order_id="order-1", customer_id="c1") -> Order:
    order = Order(customer_id=customer_id, order_id=order_id)
    order.add_item(OrderItem("p1", 2, Decimal("10.00")))
    return order


class TestInMemoryOrderRepository:

    @pytest.mark.asyncio
    async def test_save_and_find(self, repository):
        order = _order()
        await repository.save(order)

        found = await repository.find_by_id("order-1")

        assert found == order
        assert found.total_amount == Decimal("20.00")
        assert found.items == order.items

    @pytest.mark.asyncio
    async def test_every_load_returns_a_fresh_instance(self, repository):
        order = _order()
        await repository.save(order)

        first = await repository.find_by_id("order-1")
        second = await repository.find_by_id("order-1")
        first.confirm()

        assert first is not second
        assert second.status == OrderStatus.PENDING
        assert order.status == OrderStatus.PENDING

    @pytest.mark.asyncio
    async def test_mutating_after_save_does_not_leak_into_storage(self, repository):
        order = _order()
        await repository.save(order)

        order.confirm()

        assert (await repository.find_by_id("order-1")).status == OrderStatus.PENDING

    @pytest.mark.asyncio
    async def test_save_overwrites_existing(self, repository):
        order = _order()
        await repository.save(order)
        order.confirm()
        await repository.save(order)

        assert (await repository.find_by_id("order-1")).status == OrderStatus.CONFIRMED

    @pytest.mark.asyncio
    async def test_find_missing_is_not_found(self, repository):
        with pytest.raises(DomainError) as exc_info:
            await repository.find_by_id("missing")

        assert exc_info.value.kind == DomainErrorKind.NOT_FOUND

    @pytest.mark.asyncio
    async def test_find_by_customer_id(self, repository):
        await repository.save(_order("order-1", "c1"))
        await repository.save(_order("order-2", "c2"))
        await repository.save(_order("order-3", "c1"))

        orders = await repository.find_by_customer_id("c1")

        assert [order.id for order in orders] == ["order-1", "order-3"]
        assert await repository.find_by_customer_id("c3") == []

    @pytest.mark.asyncio
    async def test_delete_and_exists(self, repository):
        await repository.save(_order())
        assert await repository.exists("order-1") is True

        await repository.delete("order-1")

        assert await repository.exists("order-1") is False
        with pytest.raises(DomainError) as exc_info:
            await repository.delete("order-1")
        assert exc_info.value.kind == DomainErrorKind.NOT_FOUND

    @pytest.mark.asyncio
    async def test_corrupted_snapshot_fails_on_load(self, repository):
        snapshot = _order().to_snapshot_dict()
        snapshot["items"] = []
        snapshot["status"] = "DELIVERED"
        repository.put_snapshot(snapshot)

        with pytest.raises(DomainError) as exc_info:
            await repository.find_by_id("order-1")

        assert exc_info.value.kind == DomainErrorKind.INVALID_STATE

    @pytest.mark.asyncio
    async def test_clear(self, repository):
        await repository.save(_order())

        repository.clear()

        assert await repository.exists("order-1") is False
