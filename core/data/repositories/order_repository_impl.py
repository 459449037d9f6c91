"""SQLAlchemy implementation of OrderRepository."""

import logging
from typing import List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from core.domain.entities.order import Order
from core.domain.errors import DomainError
from core.domain.repositories.order_repository import OrderRepository

from ..mappers import OrderMapper
from ..models.order_model import OrderItemModel, OrderModel


logger = logging.getLogger(__name__)


class SqlAlchemyOrderRepository(OrderRepository):
    """
    Concrete implementation of OrderRepository using SQLAlchemy.

    Every mutating call commits its own transaction; there is no version
    column, so concurrent saves of the same order are last-write-wins.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    async def save(self, order: Order) -> None:
        """Persist order aggregate (upsert).

        Args:
            order: Order domain aggregate
        """
        existing = await self._load_model(order.id)

        if existing:
            OrderMapper.update_persistence(order, existing)
        else:
            self._session.add(OrderMapper.to_persistence(order))

        await self._session.commit()
        logger.debug(f"Order saved: {order.id} (status: {order.status.value})")

    async def find_by_id(self, order_id: str) -> Order:
        """Retrieve order by unique identifier.

        Args:
            order_id: Order identifier

        Returns:
            Order rebuilt from the stored row

        Raises:
            DomainError: NOT_FOUND if absent
        """
        model = await self._load_model(order_id)
        if model is None:
            raise DomainError.not_found(f"Order with ID {order_id} not found")

        return OrderMapper.to_domain(model)

    async def find_by_customer_id(self, customer_id: str) -> List[Order]:
        """List every order of a customer, oldest first.

        Args:
            customer_id: Customer identifier

        Returns:
            List of Order aggregates
        """
        result = await self._session.execute(
            select(OrderModel)
            .options(selectinload(OrderModel.items))
            .where(OrderModel.customer_id == customer_id)
            .order_by(OrderModel.created_at)
        )
        models = result.scalars().all()

        return [OrderMapper.to_domain(model) for model in models]

    async def delete(self, order_id: str) -> None:
        """Delete order and its items.

        Args:
            order_id: Order identifier

        Raises:
            DomainError: NOT_FOUND if absent
        """
        await self._session.execute(
            delete(OrderItemModel).where(OrderItemModel.order_id == order_id)
        )
        result = await self._session.execute(
            delete(OrderModel).where(OrderModel.id == order_id)
        )
        if result.rowcount == 0:
            await self._session.rollback()
            raise DomainError.not_found(f"Order with ID {order_id} not found")

        await self._session.commit()
        logger.info(f"Order deleted: {order_id}")

    async def exists(self, order_id: str) -> bool:
        """Check if order exists.

        Args:
            order_id: Order identifier

        Returns:
            True if order exists, False otherwise
        """
        result = await self._session.execute(
            select(func.count()).select_from(OrderModel).where(OrderModel.id == order_id)
        )
        return result.scalar_one() > 0

    async def _load_model(self, order_id: str) -> Optional[OrderModel]:
        result = await self._session.execute(
            select(OrderModel)
            .options(selectinload(OrderModel.items))
            .where(OrderModel.id == order_id)
        )
        return result.scalar_one_or_none()
