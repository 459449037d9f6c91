"""Domain layer - pure domain models and interfaces."""

from .entities import Order, OrderRebuilder
from .errors import DomainError, DomainErrorKind
from .events import DomainEvent, OrderCreatedEvent
from .id_generator import IdGenerator, UUIDGenerator
from .repositories import OrderRepository
from .services import OrderDomainService
from .value_objects import OrderItem, OrderStatus

__all__ = [
    "DomainError",
    "DomainErrorKind",
    "DomainEvent",
    "IdGenerator",
    "Order",
    "OrderCreatedEvent",
    "OrderDomainService",
    "OrderItem",
    "OrderRebuilder",
    "OrderRepository",
    "OrderStatus",
    "UUIDGenerator",
]
