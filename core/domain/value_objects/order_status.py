"""Order lifecycle status."""
from enum import Enum


class OrderStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    DELIVERED = "DELIVERED"

    @property
    def is_terminal(self) -> bool:
        """CANCELLED and DELIVERED accept no further transitions."""
        return self in _TERMINAL_STATES


_TERMINAL_STATES = {OrderStatus.CANCELLED, OrderStatus.DELIVERED}
