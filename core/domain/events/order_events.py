"""
Order Domain Events.

Events that occur during the order lifecycle. Handed to an external
publisher by the application layer; the domain never publishes.
"""
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional, Tuple

from ..entities.order import Order
from ..value_objects import OrderItem
from .base import DomainEvent


@dataclass(frozen=True)
class OrderCreatedEvent(DomainEvent):
    """
    Order was created and persisted.

    Trigger: OrderDomainService.create_order
    Wire format (JSON):
        eventType, orderId, customerId,
        items[{productId, quantity, unitPrice, subtotal}],
        totalAmount, createdAt (ISO-8601)
    """

    order_id: str = ""
    customer_id: str = ""
    items: Tuple[OrderItem, ...] = ()
    total_amount: Decimal = Decimal("0")
    created_at: Optional[datetime] = None

    @classmethod
    def from_order(cls, order: Order) -> "OrderCreatedEvent":
        """Capture the creation snapshot of an order."""
        return cls(
            order_id=order.id,
            customer_id=order.customer_id,
            items=tuple(order.items),
            total_amount=order.total_amount,
            created_at=order.created_at,
        )

    @property
    def aggregate_id(self) -> str:
        return self.order_id

    def to_dict(self) -> Dict[str, Any]:
        return {
            "eventType": self.event_type,
            "orderId": self.order_id,
            "customerId": self.customer_id,
            "items": [
                {
                    "productId": item.product_id,
                    "quantity": item.quantity,
                    "unitPrice": item.unit_price,
                    "subtotal": item.subtotal,
                }
                for item in self.items
            ],
            "totalAmount": self.total_amount,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
