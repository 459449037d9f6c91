"""
Order Rebuilder.

Rebuilds an Order aggregate from a stored snapshot by replaying domain
operations instead of assigning fields. Anything loaded from storage is
therefore reachable through the same state machine used for live
mutation; an unreachable stored state fails with the same guards.
"""
import logging
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Dict, Mapping, Tuple

from ..errors import DomainError
from ..value_objects import OrderItem, OrderStatus
from .order import Order


logger = logging.getLogger(__name__)


# Directed transition paths from PENDING to every status.
# CANCELLED is reached directly from PENDING: the snapshot keeps only the
# final status, and cancel behaves identically from PENDING or CONFIRMED.
_REPLAY_PATHS: Dict[OrderStatus, Tuple[Callable[[Order], None], ...]] = {
    OrderStatus.PENDING: (),
    OrderStatus.CONFIRMED: (Order.confirm,),
    OrderStatus.CANCELLED: (Order.cancel,),
    OrderStatus.DELIVERED: (Order.confirm, Order.deliver),
}


def _as_utc(value: Any, order_id: str) -> datetime:
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            raise DomainError.invalid_argument(
                f"Stored order {order_id} has an invalid timestamp: {value!r}"
            )
    if not isinstance(value, datetime):
        raise DomainError.invalid_argument(
            f"Stored order {order_id} has an invalid timestamp: {value!r}"
        )
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _stored_amount(value: Any, what: str, order_id: str) -> Decimal:
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        amount = None
    if amount is None or not amount.is_finite():
        raise DomainError.invalid_argument(
            f"Stored order {order_id} has a non-numeric {what}: {value!r}"
        )
    return amount


class OrderRebuilder:
    """
    Rebuilds Order aggregates from stored snapshots.

    Steps:
    1. Fresh Order with the stored id and customer id (PENDING)
    2. Re-add every stored item through add_item()
    3. Replay the transition path to the stored status
    4. Restore stored created_at / updated_at
    """

    @staticmethod
    def rebuild(snapshot: Mapping[str, Any]) -> Order:
        """
        Rebuild Order from a snapshot dictionary.

        Args:
            snapshot: Mapping with id, customer_id, items, status,
                total_amount, created_at, updated_at

        Returns:
            Rebuilt Order instance

        Raises:
            DomainError: INVALID_STATE if the stored status is unknown or
                unreachable, INVALID_ARGUMENT if stored data is malformed
        """
        order = Order(customer_id=snapshot.get("customer_id"), order_id=snapshot.get("id"))

        for item_data in snapshot.get("items") or []:
            order.add_item(OrderRebuilder._rebuild_item(item_data, order.id))

        target = OrderRebuilder._parse_status(snapshot.get("status"), order.id)
        for transition in _REPLAY_PATHS[target]:
            try:
                transition(order)
            except DomainError as e:
                logger.warning(
                    f"Stored order {order.id} is unreachable as {target.value}: {e.message}"
                )
                raise DomainError.invalid_state(
                    f"Stored order {order.id} cannot reach status {target.value}: {e.message}"
                ) from e

        OrderRebuilder._check_stored_total(order, snapshot.get("total_amount"))

        order._restore_timestamps(
            created_at=_as_utc(snapshot.get("created_at"), order.id),
            updated_at=_as_utc(snapshot.get("updated_at"), order.id),
        )

        logger.debug(
            f"Rebuilt Order {order.id} ({order.status.value}, {len(order.items)} items)"
        )
        return order

    @staticmethod
    def _rebuild_item(item_data: Mapping[str, Any], order_id: str) -> OrderItem:
        item = OrderItem(
            product_id=item_data.get("product_id"),
            quantity=item_data.get("quantity"),
            unit_price=item_data.get("unit_price"),
            id=item_data.get("id"),
        )

        stored_subtotal = item_data.get("subtotal")
        if (
            stored_subtotal is not None
            and _stored_amount(stored_subtotal, f"subtotal for item {item.id}", order_id)
            != item.subtotal
        ):
            logger.warning(
                f"Stored subtotal {stored_subtotal} for item {item.id} differs from "
                f"recomputed {item.subtotal}; using recomputed value"
            )
        return item

    @staticmethod
    def _parse_status(value: Any, order_id: str) -> OrderStatus:
        try:
            return OrderStatus(value)
        except ValueError:
            raise DomainError.invalid_state(
                f"Stored order {order_id} has unknown status: {value!r}"
            )

    @staticmethod
    def _check_stored_total(order: Order, stored_total: Any) -> None:
        if stored_total is None:
            return
        if _stored_amount(stored_total, "total", order.id) != order.total_amount:
            logger.warning(
                f"Stored total {stored_total} for order {order.id} differs from "
                f"recomputed {order.total_amount}; using recomputed value"
            )
