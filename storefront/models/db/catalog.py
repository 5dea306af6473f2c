"""
Product catalog models: Categories and Products.
"""

from typing import List, Optional

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.ext.hybrid import hybrid_property
from sqlalchemy.orm import Mapped, relationship

from .base import Base, TimestampMixin


class Category(Base, TimestampMixin):
    """Product categories, optionally nested one level under a parent."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True)
    description = Column(Text)
    image_url = Column(String(500))
    parent_id = Column(Integer, ForeignKey("categories.id", ondelete="SET NULL"), nullable=True)

    parent: Mapped[Optional["Category"]] = relationship("Category", remote_side=[id], back_populates="children")
    children: Mapped[List["Category"]] = relationship("Category", back_populates="parent")
    products: Mapped[List["Product"]] = relationship("Product", back_populates="category")

    def __repr__(self):
        return f"<Category(id={self.id}, name='{self.name}')>"


class Product(Base, TimestampMixin):
    """Catalog item. Stock only changes when an order is created."""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    short_description = Column(String(500))
    price = Column(Float, nullable=False)
    original_price = Column(Float)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True)
    image_url = Column(String(500))
    stock_quantity = Column(Integer, default=0, nullable=False)
    sku = Column(String(100), unique=True)
    weight = Column(Float)
    dimensions = Column(String(100))
    is_active = Column(Boolean, default=True, nullable=False)
    is_featured = Column(Boolean, default=False, nullable=False)

    category: Mapped[Optional["Category"]] = relationship("Category", back_populates="products")

    __table_args__ = (
        CheckConstraint("price >= 0", name="check_product_price_non_negative"),
        CheckConstraint("stock_quantity >= 0", name="check_product_stock_non_negative"),
        Index("idx_products_active_created", "is_active", "created_at"),
        Index("idx_products_category", "category_id"),
        Index("idx_products_featured", "is_featured"),
    )

    @hybrid_property
    def is_in_stock(self) -> bool:
        return self.stock_quantity > 0

    @property
    def discount_percentage(self) -> float:
        """Percentage off the original price, 0 when there is no discount."""
        if self.original_price and self.original_price > self.price:
            return round((self.original_price - self.price) / self.original_price * 100, 2)
        return 0.0

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', price={self.price})>"
