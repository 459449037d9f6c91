"""Tests for the outbound event publishers."""
import json
from decimal import Decimal
from unittest.mock import AsyncMock, patch

import pytest

from core.domain.entities.order import Order
from core.domain.events.order_events import OrderCreatedEvent
from core.domain.value_objects import OrderItem
from core.infrastructure.bus.in_memory_publisher import InMemoryEventPublisher
from core.infrastructure.bus.redis_stream_publisher import RedisStreamPublisher


@pytest.fixture
def event() -> OrderCreatedEvent:
    order = Order(customer_id="c1", order_id="order-1")
    order.add_item(OrderItem("p1", 2, Decimal("10.00")))
    return OrderCreatedEvent.from_order(order)


class TestRedisStreamPublisher:

    @pytest.mark.asyncio
    async def test_publish_adds_message_to_stream(self, event):
        publisher = RedisStreamPublisher(stream_name="orders-test", maxlen=500)
        publisher._redis_client = AsyncMock()
        publisher._redis_client.xadd.return_value = "1700000000000-0"

        msg_id = await publisher.publish_order_created(event)

        assert msg_id == "1700000000000-0"
        publisher._redis_client.xadd.assert_awaited_once()
        args, kwargs = publisher._redis_client.xadd.call_args
        stream, message = args
        assert stream == "orders-test"
        assert kwargs == {"maxlen": 500, "approximate": True}
        assert message["event_id"] == event.event_id
        assert message["event_type"] == "OrderCreated"
        assert message["order_id"] == "order-1"
        assert json.loads(message["payload"])["totalAmount"] == 20.0

    @pytest.mark.asyncio
    async def test_publish_failure_propagates(self, event):
        publisher = RedisStreamPublisher()
        publisher._redis_client = AsyncMock()
        publisher._redis_client.xadd.side_effect = ConnectionError("connection refused")

        with pytest.raises(ConnectionError):
            await publisher.publish_order_created(event)

    @pytest.mark.asyncio
    async def test_publish_connects_lazily(self, event):
        client = AsyncMock()
        client.xadd.return_value = "1-0"

        with patch(
            "core.infrastructure.bus.redis_stream_publisher.aioredis.from_url",
            return_value=client,
        ) as from_url:
            publisher = RedisStreamPublisher(redis_url="redis://cache:6379/1")
            await publisher.publish_order_created(event)

        from_url.assert_called_once()
        assert from_url.call_args.args == ("redis://cache:6379/1",)
        client.ping.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_failed_connect_resets_client(self):
        client = AsyncMock()
        client.ping.side_effect = ConnectionError("no redis")

        with patch(
            "core.infrastructure.bus.redis_stream_publisher.aioredis.from_url",
            return_value=client,
        ):
            publisher = RedisStreamPublisher()
            with pytest.raises(ConnectionError):
                await publisher.connect()

        assert publisher._redis_client is None

    @pytest.mark.asyncio
    async def test_disconnect_closes_client(self):
        publisher = RedisStreamPublisher()
        client = AsyncMock()
        publisher._redis_client = client

        await publisher.disconnect()

        client.aclose.assert_awaited_once()
        assert publisher._redis_client is None


class TestInMemoryEventPublisher:

    @pytest.mark.asyncio
    async def test_records_wire_payload(self, event):
        publisher = InMemoryEventPublisher()

        result = await publisher.publish_order_created(event)

        assert result == event.event_id
        assert publisher.published == [json.loads(event.to_json())]

    @pytest.mark.asyncio
    async def test_clear(self, event):
        publisher = InMemoryEventPublisher()
        await publisher.publish_order_created(event)

        publisher.clear()

        assert publisher.published == []
