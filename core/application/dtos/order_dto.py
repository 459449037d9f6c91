"""Application DTOs for Order operations."""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from core.domain.entities.order import Order
from core.domain.events.order_events import OrderCreatedEvent
from core.domain.value_objects import OrderItem


# JSON bodies use camelCase; Python code uses snake_case.
_CAMEL_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class CreateOrderItemRequest(BaseModel):
    """Request DTO for one line of a new order.

    Fields are loosely typed on purpose: business validation happens in
    CreateOrderUseCase and surfaces as INVALID_ARGUMENT.
    """

    product_id: Optional[str] = Field(None, description="Product identifier")
    quantity: Optional[Decimal] = Field(None, description="Quantity ordered (whole number > 0)")
    unit_price: Optional[Decimal] = Field(None, description="Unit price (> 0)")

    model_config = _CAMEL_CONFIG


class CreateOrderRequest(BaseModel):
    """Request DTO for creating an order."""

    customer_id: Optional[str] = Field(None, description="Customer identifier")
    items: Optional[List[CreateOrderItemRequest]] = Field(None, description="Order items")

    model_config = _CAMEL_CONFIG


class OrderItemDTO(BaseModel):
    """DTO for order item."""

    id: str = Field(..., description="Item identifier")
    product_id: str = Field(..., description="Product identifier")
    quantity: int = Field(..., gt=0, description="Quantity ordered")
    unit_price: float = Field(..., gt=0, description="Unit price")
    subtotal: float = Field(..., gt=0, description="quantity x unit price")

    model_config = _CAMEL_CONFIG

    @classmethod
    def from_domain(cls, item: OrderItem) -> "OrderItemDTO":
        return cls(
            id=item.id,
            product_id=item.product_id,
            quantity=item.quantity,
            unit_price=float(item.unit_price),
            subtotal=float(item.subtotal),
        )


class OrderDTO(BaseModel):
    """Response DTO for order details."""

    id: str = Field(..., description="Order identifier")
    customer_id: str = Field(..., description="Customer identifier")
    items: List[OrderItemDTO] = Field(default_factory=list, description="Order items")
    status: str = Field(..., description="Order status")
    total_amount: float = Field(..., ge=0, description="Sum of item subtotals")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last modification timestamp")

    model_config = _CAMEL_CONFIG

    @classmethod
    def from_domain(cls, order: Order) -> "OrderDTO":
        return cls(
            id=order.id,
            customer_id=order.customer_id,
            items=[OrderItemDTO.from_domain(item) for item in order.items],
            status=order.status.value,
            total_amount=float(order.total_amount),
            created_at=order.created_at,
            updated_at=order.updated_at,
        )


class OrderCreatedItemDTO(BaseModel):
    """Item as carried by the OrderCreated event (no item id)."""

    product_id: str
    quantity: int
    unit_price: float
    subtotal: float

    model_config = _CAMEL_CONFIG


class OrderCreatedDTO(BaseModel):
    """Response DTO mirroring the OrderCreated event payload."""

    event_type: str = Field("OrderCreated", description="Event type")
    order_id: str = Field(..., description="Order identifier")
    customer_id: str = Field(..., description="Customer identifier")
    items: List[OrderCreatedItemDTO] = Field(default_factory=list)
    total_amount: float = Field(..., ge=0)
    created_at: datetime = Field(..., description="Creation timestamp")

    model_config = _CAMEL_CONFIG

    @classmethod
    def from_event(cls, event: OrderCreatedEvent) -> "OrderCreatedDTO":
        return cls(
            event_type=event.event_type,
            order_id=event.order_id,
            customer_id=event.customer_id,
            items=[
                OrderCreatedItemDTO(
                    product_id=item.product_id,
                    quantity=item.quantity,
                    unit_price=float(item.unit_price),
                    subtotal=float(item.subtotal),
                )
                for item in event.items
            ],
            total_amount=float(event.total_amount),
            created_at=event.created_at,
        )
