"""
Per-user shopping state: cart lines and wishlist entries.
"""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, relationship

from .base import Base, TimestampMixin
from .catalog import Product


class CartItem(Base, TimestampMixin):
    """Unpurchased intent. At most one row per (user, product)."""

    __tablename__ = "cart"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)

    product: Mapped[Product] = relationship("Product")

    __table_args__ = (
        UniqueConstraint("user_id", "product_id", name="uq_cart_user_product"),
        CheckConstraint("quantity > 0", name="check_cart_quantity_positive"),
    )

    @property
    def line_total(self) -> float:
        return self.product.price * self.quantity


class WishlistItem(Base, TimestampMixin):
    """Saved product. At most one row per (user, product)."""

    __tablename__ = "wishlist"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id", ondelete="CASCADE"), nullable=False)

    product: Mapped[Product] = relationship("Product")

    __table_args__ = (UniqueConstraint("user_id", "product_id", name="uq_wishlist_user_product"),)
