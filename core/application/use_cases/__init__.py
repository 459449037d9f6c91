"""Application use cases."""
from .create_order import CreateOrderUseCase

__all__ = ["CreateOrderUseCase"]
