"""
Order line item value object.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

from ..errors import DomainError
from ..id_generator import IdGenerator, default_id_generator


# Money never carries more decimal places than this; SQL columns use the same scale.
MONEY_SCALE = 4


def _to_quantity(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise DomainError.invalid_argument("Quantity must be a whole number")
    if not isinstance(value, int) and not Decimal(str(value)).is_finite():
        raise DomainError.invalid_argument("Quantity must be a whole number")
    if value <= 0:
        raise DomainError.invalid_argument("Quantity must be greater than zero")
    if value != int(value):
        raise DomainError.invalid_argument("Quantity must be a whole number")
    return int(value)


def _to_unit_price(value: Any) -> Decimal:
    if isinstance(value, bool) or value is None:
        raise DomainError.invalid_argument("Unit price must be a number")
    try:
        price = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        raise DomainError.invalid_argument(f"Unit price must be a number, got: {value!r}")
    if not price.is_finite():
        raise DomainError.invalid_argument("Unit price must be a finite number")
    if price <= 0:
        raise DomainError.invalid_argument("Unit price must be greater than zero")
    if price.normalize().as_tuple().exponent < -MONEY_SCALE:
        raise DomainError.invalid_argument(
            f"Unit price must have at most {MONEY_SCALE} decimal places, got: {value!r}"
        )
    return price


@dataclass(frozen=True)
class OrderItem:
    """
    Immutable line item of an order.

    Equality covers product_id, quantity and unit_price only; two items
    with different ids but the same contents compare equal.

    The subtotal is computed once here and never recomputed.
    Money is always Decimal, never float.
    """
    product_id: str
    quantity: int
    unit_price: Decimal
    id: Optional[str] = field(default=None, compare=False)
    subtotal: Decimal = field(init=False, compare=False)

    def __post_init__(self):
        if not isinstance(self.product_id, str) or not self.product_id.strip():
            raise DomainError.invalid_argument("Product ID cannot be empty")

        quantity = _to_quantity(self.quantity)
        unit_price = _to_unit_price(self.unit_price)

        object.__setattr__(self, "quantity", quantity)
        object.__setattr__(self, "unit_price", unit_price)
        object.__setattr__(self, "subtotal", quantity * unit_price)

        if self.id is None:
            object.__setattr__(self, "id", default_id_generator().generate())

    @classmethod
    def create(
        cls,
        product_id: str,
        quantity: int,
        unit_price: Any,
        id_generator: Optional[IdGenerator] = None,
    ) -> "OrderItem":
        """Build a new item with an id from the given generator."""
        generator = id_generator or default_id_generator()
        return cls(
            product_id=product_id,
            quantity=quantity,
            unit_price=unit_price,
            id=generator.generate(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "product_id": self.product_id,
            "quantity": self.quantity,
            "unit_price": self.unit_price,
            "subtotal": self.subtotal,
        }

    def __str__(self) -> str:
        return f"{self.quantity} x {self.product_id} @ {self.unit_price}"
