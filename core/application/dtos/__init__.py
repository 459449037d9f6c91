"""Application DTOs."""

from .order_dto import (
    CreateOrderItemRequest,
    CreateOrderRequest,
    OrderCreatedDTO,
    OrderCreatedItemDTO,
    OrderDTO,
    OrderItemDTO,
)

__all__ = [
    "CreateOrderItemRequest",
    "CreateOrderRequest",
    "OrderCreatedDTO",
    "OrderCreatedItemDTO",
    "OrderDTO",
    "OrderItemDTO",
]
