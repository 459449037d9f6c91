"""Static mappers for domain entities ↔ database models."""

from typing import Any, Dict, List

from core.domain.entities.order import Order
from core.domain.entities.order_rebuilder import OrderRebuilder
from core.domain.value_objects import OrderItem

from .models.order_model import OrderItemModel, OrderModel


class OrderItemMapper:
    """Static mapper for OrderItem ↔ OrderItemModel transformation."""

    @staticmethod
    def to_snapshot(model: OrderItemModel) -> Dict[str, Any]:
        """Convert ORM row to the stored item representation.

        Args:
            model: OrderItemModel instance

        Returns:
            Item snapshot dictionary
        """
        return {
            "id": model.item_id,
            "product_id": model.product_id,
            "quantity": model.quantity,
            "unit_price": model.unit_price,
            "subtotal": model.subtotal,
        }

    @staticmethod
    def to_persistence(entity: OrderItem, order_id: str, position: int) -> OrderItemModel:
        """Convert domain value object to ORM model.

        Args:
            entity: OrderItem value object
            order_id: Owning order id
            position: Index of the item within the order

        Returns:
            OrderItemModel instance
        """
        return OrderItemModel(
            order_id=order_id,
            item_id=entity.id,
            position=position,
            product_id=entity.product_id,
            quantity=entity.quantity,
            unit_price=entity.unit_price,
            subtotal=entity.subtotal,
        )


class OrderMapper:
    """Static mapper for Order ↔ OrderModel transformation with nested items."""

    @staticmethod
    def to_snapshot(model: OrderModel) -> Dict[str, Any]:
        """Convert ORM model to the stored order representation."""
        return {
            "id": model.id,
            "customer_id": model.customer_id,
            "items": [OrderItemMapper.to_snapshot(item) for item in model.items],
            "status": model.status,
            "total_amount": model.total_amount,
            "created_at": model.created_at,
            "updated_at": model.updated_at,
        }

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        """Rebuild domain aggregate from ORM model by replaying transitions.

        Args:
            model: OrderModel instance (items loaded)

        Returns:
            Order domain aggregate

        Raises:
            DomainError: if the stored state is not reachable
        """
        return OrderRebuilder.rebuild(OrderMapper.to_snapshot(model))

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        """Convert domain aggregate to ORM model (with nested items).

        Args:
            entity: Order domain aggregate

        Returns:
            OrderModel instance
        """
        order_model = OrderModel(
            id=entity.id,
            customer_id=entity.customer_id,
            status=entity.status.value,
            total_amount=entity.total_amount,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
        order_model.items = OrderMapper._item_models(entity)
        return order_model

    @staticmethod
    def update_persistence(entity: Order, model: OrderModel) -> OrderModel:
        """Update existing ORM model from domain entity (for updates).

        Args:
            entity: Order domain aggregate
            model: Existing OrderModel instance (items loaded)

        Returns:
            Updated OrderModel instance
        """
        model.customer_id = entity.customer_id
        model.status = entity.status.value
        model.total_amount = entity.total_amount
        model.created_at = entity.created_at
        model.updated_at = entity.updated_at

        # Clear and rebuild items
        model.items.clear()
        model.items.extend(OrderMapper._item_models(entity))
        return model

    @staticmethod
    def _item_models(entity: Order) -> List[OrderItemModel]:
        return [
            OrderItemMapper.to_persistence(item, entity.id, position)
            for position, item in enumerate(entity.items)
        ]
