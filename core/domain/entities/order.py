"""
Order aggregate root.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi

State machine:
    PENDING -> CONFIRMED -> DELIVERED
    PENDING -> CANCELLED
    CONFIRMED -> CANCELLED
CANCELLED and DELIVERED are terminal.
"""
from decimal import Decimal
from typing import Any, Dict, List, Optional

from ..errors import DomainError
from ..value_objects import OrderItem, OrderStatus
from .base import BaseEntity


class Order(BaseEntity):
    """
    Order aggregate root.

    The aggregate is the sole mutator of its items and status. Every
    accessor hands out a snapshot, never the internal list, and every
    failed operation leaves the order exactly as it was.
    """

    def __init__(self, customer_id: str, order_id: Optional[str] = None):
        if not isinstance(customer_id, str) or not customer_id.strip():
            raise DomainError.invalid_argument("Customer ID cannot be empty")

        super().__init__(order_id)
        self._customer_id = customer_id
        self._items: List[OrderItem] = []
        self._status = OrderStatus.PENDING
        self._total_amount = Decimal("0")

    # =========================================================================
    # ACCESSORS
    # =========================================================================

    @property
    def customer_id(self) -> str:
        return self._customer_id

    @property
    def items(self) -> List[OrderItem]:
        return list(self._items)

    @property
    def status(self) -> OrderStatus:
        return self._status

    @property
    def total_amount(self) -> Decimal:
        return self._total_amount

    # =========================================================================
    # ITEM MANAGEMENT (PENDING only)
    # =========================================================================

    def add_item(self, item: OrderItem) -> None:
        """Add item and recalculate order total."""
        self._ensure_pending()
        if not isinstance(item, OrderItem):
            raise DomainError.invalid_argument(
                f"Expected an OrderItem, got {type(item).__name__}"
            )

        self._items.append(item)
        self._recalculate_total()
        self._touch()

    def remove_item(self, item_id: str) -> None:
        """Remove the item with the given id and recalculate order total."""
        self._ensure_pending()
        remaining = [item for item in self._items if item.id != item_id]
        if len(remaining) == len(self._items):
            raise DomainError.invalid_argument(
                f"Item {item_id} is not part of order {self.id}"
            )

        self._items = remaining
        self._recalculate_total()
        self._touch()

    # =========================================================================
    # STATE TRANSITIONS
    # =========================================================================

    def confirm(self) -> None:
        """Business rule: only a non-empty PENDING order can be confirmed."""
        if self._status != OrderStatus.PENDING:
            raise DomainError.invalid_state(
                f"Order is not in pending status (current: {self._status.value})"
            )
        if not self._items:
            raise DomainError.invalid_state("Cannot confirm an empty order")

        self._status = OrderStatus.CONFIRMED
        self._touch()

    def cancel(self) -> None:
        """Business rule: cancel from PENDING or CONFIRMED, empty orders included."""
        if self._status.is_terminal:
            raise DomainError.invalid_state(
                f"Cannot cancel a {self._status.value.lower()} order"
            )

        self._status = OrderStatus.CANCELLED
        self._touch()

    def deliver(self) -> None:
        """Business rule: only CONFIRMED orders can be delivered."""
        if self._status != OrderStatus.CONFIRMED:
            raise DomainError.invalid_state(
                f"Can only deliver confirmed orders (current: {self._status.value})"
            )

        self._status = OrderStatus.DELIVERED
        self._touch()

    # =========================================================================
    # INTERNALS
    # =========================================================================

    def _ensure_pending(self) -> None:
        if self._status != OrderStatus.PENDING:
            raise DomainError.invalid_state(
                f"Cannot modify a non-pending order (current: {self._status.value})"
            )

    def _recalculate_total(self) -> None:
        """Internal: Sum all item subtotals."""
        self._total_amount = sum((item.subtotal for item in self._items), Decimal("0"))

    # =========================================================================
    # SNAPSHOT SUPPORT
    # =========================================================================

    def to_snapshot_dict(self) -> Dict[str, Any]:
        """
        Serialize Order state to a plain dictionary for storage.

        The snapshot is read back through OrderRebuilder, never by
        assigning its fields directly.

        Returns:
            Dictionary containing all Order state
        """
        return {
            "id": self.id,
            "customer_id": self._customer_id,
            "items": [item.to_dict() for item in self._items],
            "status": self._status.value,
            "total_amount": self._total_amount,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    def __repr__(self) -> str:
        return (
            f"Order(id={self.id!r}, customer_id={self._customer_id!r}, "
            f"status={self._status.value}, items={len(self._items)}, "
            f"total_amount={self._total_amount})"
        )
