"""SQLAlchemy ORM models for Order aggregate."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import relationship

from core.domain.value_objects.order_item import MONEY_SCALE

from .base import Base


class OrderModel(Base):
    """SQLAlchemy ORM model for orders table."""

    __tablename__ = "orders"

    id = Column(String(36), primary_key=True)
    customer_id = Column(String(255), nullable=False, index=True)
    status = Column(String(20), nullable=False, default="PENDING")
    total_amount = Column(Numeric(18, MONEY_SCALE), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)

    # Relationship to items
    items = relationship(
        "OrderItemModel",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItemModel.position",
    )

    __table_args__ = (
        Index("ix_orders_customer_status", "customer_id", "status"),
    )

    def __repr__(self):
        return f"<OrderModel(id={self.id}, customer_id={self.customer_id}, status={self.status})>"


class OrderItemModel(Base):
    """SQLAlchemy ORM model for order_items table."""

    __tablename__ = "order_items"

    # Surrogate key: items are rewritten on every save
    pk = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(String(36), ForeignKey("orders.id"), nullable=False, index=True)
    item_id = Column(String(36), nullable=False)
    position = Column(Integer, nullable=False, default=0)
    product_id = Column(String(255), nullable=False)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(18, MONEY_SCALE), nullable=False)
    subtotal = Column(Numeric(18, MONEY_SCALE), nullable=False)

    # Relationship back to order
    order = relationship("OrderModel", back_populates="items")
