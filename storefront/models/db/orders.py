"""
Order management models
"""

from typing import TYPE_CHECKING, List

from sqlalchemy import CheckConstraint, Column, DateTime, Float, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, relationship

from .base import Base, TimestampMixin, utcnow

if TYPE_CHECKING:
    from .user import User


class Order(Base, TimestampMixin):
    """Purchase snapshot created from a cart."""

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_number = Column(String(50), unique=True, nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    status = Column(String(20), nullable=False, default="pending")  # see OrderStatus
    total_amount = Column(Float, nullable=False)

    # Payment
    payment_method = Column(String(50), nullable=False, default="cash_on_delivery")
    payment_status = Column(String(20), nullable=False, default="pending")

    # Shipping
    shipping_address = Column(String(500), nullable=False)
    shipping_city = Column(String(100), nullable=False)
    shipping_country = Column(String(100))
    shipping_phone = Column(String(30), nullable=False)

    notes = Column(Text)

    user: Mapped["User"] = relationship("User", back_populates="orders")
    items: Mapped[List["OrderItem"]] = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
    )

    __table_args__ = (
        Index("idx_orders_user_created", "user_id", "created_at"),
        Index("idx_orders_status", "status"),
    )

    def __repr__(self):
        return f"<Order(number='{self.order_number}', status='{self.status}', total={self.total_amount})>"


class OrderItem(Base):
    """
    Immutable line snapshot.

    Name and unit price are copied at creation time; the product reference
    is informational only and survives product deletion as NULL.
    """

    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="SET NULL"), nullable=True, index=True)
    product_name = Column(String(255), nullable=False)
    product_price = Column(Float, nullable=False)
    quantity = Column(Integer, nullable=False)
    total_price = Column(Float, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    order: Mapped["Order"] = relationship("Order", back_populates="items")

    __table_args__ = (CheckConstraint("quantity > 0", name="check_order_item_quantity_positive"),)
