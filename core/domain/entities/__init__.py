"""Domain entities."""

from .order import Order
from .order_rebuilder import OrderRebuilder

__all__ = ["Order", "OrderRebuilder"]
