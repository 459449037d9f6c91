"""Integration tests for the orders HTTP API."""
import pytest


ORDER_PAYLOAD = {
    "customerId": "c1",
    "items": [
        {"productId": "p1", "quantity": 2, "unitPrice": 10.00},
        {"productId": "p2", "quantity": 1, "unitPrice": 5.50},
    ],
}


def _create(client, payload=None):
    response = client.post("/api/orders", json=payload or ORDER_PAYLOAD)
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateOrder:

    def test_create_returns_order_created_payload(self, test_client, api_publisher):
        body = _create(test_client)

        assert body["eventType"] == "OrderCreated"
        assert body["customerId"] == "c1"
        assert body["totalAmount"] == 25.5
        assert body["items"] == [
            {"productId": "p1", "quantity": 2, "unitPrice": 10.0, "subtotal": 20.0},
            {"productId": "p2", "quantity": 1, "unitPrice": 5.5, "subtotal": 5.5},
        ]
        assert body["orderId"]
        assert body["createdAt"]

        assert [event["orderId"] for event in api_publisher.published] == [body["orderId"]]

    @pytest.mark.parametrize(
        "payload",
        [
            {"customerId": "", "items": ORDER_PAYLOAD["items"]},
            {"customerId": "c1", "items": []},
            {"customerId": "c1"},
            {"customerId": "c1", "items": [{"productId": "p1", "quantity": 0, "unitPrice": 1}]},
            {"customerId": "c1", "items": [{"productId": "p1", "quantity": 1.5, "unitPrice": 1}]},
            {"customerId": "c1", "items": [{"productId": "p1", "quantity": 1, "unitPrice": -1}]},
            {"customerId": "c1", "items": [{"quantity": 1, "unitPrice": 1}]},
        ],
    )
    def test_invalid_payload_is_bad_request(self, test_client, api_publisher, payload):
        response = test_client.post("/api/orders", json=payload)

        assert response.status_code == 400
        assert response.json()["error"] == "InvalidArgument"
        assert api_publisher.published == []


class TestQueries:

    @pytest.mark.parametrize(
        "field, value", [("total_amount", "abc"), ("created_at", "yesterday")]
    )
    def test_corrupted_stored_order_is_bad_request(self, test_client, api_repository, field, value):
        order_id = _create(test_client)["orderId"]
        snapshot = api_repository._storage[order_id]
        api_repository.put_snapshot({**snapshot, field: value})

        response = test_client.get(f"/api/orders/{order_id}")

        assert response.status_code == 400
        assert response.json()["error"] == "InvalidArgument"

    def test_get_order(self, test_client):
        created = _create(test_client)

        response = test_client.get(f"/api/orders/{created['orderId']}")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == created["orderId"]
        assert body["customerId"] == "c1"
        assert body["status"] == "PENDING"
        assert body["totalAmount"] == 25.5
        assert len(body["items"]) == 2
        assert {"id", "productId", "quantity", "unitPrice", "subtotal"} == set(body["items"][0])
        assert "createdAt" in body and "updatedAt" in body

    def test_get_missing_order_is_not_found(self, test_client):
        response = test_client.get("/api/orders/missing")

        assert response.status_code == 404
        assert response.json()["error"] == "NotFound"

    def test_customer_orders(self, test_client):
        first = _create(test_client)
        second = _create(test_client)
        _create(test_client, {**ORDER_PAYLOAD, "customerId": "c2"})

        response = test_client.get("/api/orders/customer/c1")

        assert response.status_code == 200
        assert [order["id"] for order in response.json()] == [first["orderId"], second["orderId"]]

    def test_customer_without_orders_gets_empty_list(self, test_client):
        response = test_client.get("/api/orders/customer/nobody")

        assert response.status_code == 200
        assert response.json() == []


class TestTransitions:

    def test_confirm_then_deliver(self, test_client):
        order_id = _create(test_client)["orderId"]

        confirmed = test_client.post(f"/api/orders/{order_id}/confirm")
        delivered = test_client.post(f"/api/orders/{order_id}/deliver")

        assert confirmed.status_code == 200
        assert confirmed.json()["status"] == "CONFIRMED"
        assert delivered.status_code == 200
        assert delivered.json()["status"] == "DELIVERED"
        assert test_client.get(f"/api/orders/{order_id}").json()["status"] == "DELIVERED"

    def test_cancel(self, test_client):
        order_id = _create(test_client)["orderId"]

        response = test_client.post(f"/api/orders/{order_id}/cancel")

        assert response.status_code == 200
        assert response.json()["status"] == "CANCELLED"

    def test_illegal_transition_is_bad_request(self, test_client):
        order_id = _create(test_client)["orderId"]

        response = test_client.post(f"/api/orders/{order_id}/deliver")

        assert response.status_code == 400
        assert response.json()["error"] == "InvalidState"
        assert test_client.get(f"/api/orders/{order_id}").json()["status"] == "PENDING"

    def test_cancel_delivered_order_is_bad_request(self, test_client):
        order_id = _create(test_client)["orderId"]
        test_client.post(f"/api/orders/{order_id}/confirm")
        test_client.post(f"/api/orders/{order_id}/deliver")

        response = test_client.post(f"/api/orders/{order_id}/cancel")

        assert response.status_code == 400
        assert response.json()["error"] == "InvalidState"

    @pytest.mark.parametrize("action", ["confirm", "cancel", "deliver"])
    def test_transition_on_missing_order_is_not_found(self, test_client, action):
        response = test_client.post(f"/api/orders/missing/{action}")

        assert response.status_code == 404


class TestHealth:

    def test_health(self, test_client):
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_ready(self, test_client):
        response = test_client.get("/health/ready")

        assert response.status_code == 200
        assert response.json()["status"] == "ready"

    def test_root(self, test_client):
        assert test_client.get("/").json()["message"] == "Order Service"
