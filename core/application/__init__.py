"""Application layer - use cases, interfaces, and DTOs."""

from .dtos import (
    CreateOrderItemRequest,
    CreateOrderRequest,
    OrderCreatedDTO,
    OrderDTO,
    OrderItemDTO,
)
from .interfaces import IEventPublisher
from .use_cases import CreateOrderUseCase

__all__ = [
    # DTOs
    "CreateOrderItemRequest",
    "CreateOrderRequest",
    "OrderCreatedDTO",
    "OrderDTO",
    "OrderItemDTO",
    # Use Cases
    "CreateOrderUseCase",
    # Interfaces
    "IEventPublisher",
]
