"""
SQLAlchemy models for the storefront schema.
"""

from .base import Base, TimestampMixin
from .catalog import Category, Product
from .orders import Order, OrderItem
from .reviews import Review
from .shopping import CartItem, WishlistItem
from .user import User

__all__ = [
    "Base",
    "CartItem",
    "Category",
    "Order",
    "OrderItem",
    "Product",
    "Review",
    "TimestampMixin",
    "User",
    "WishlistItem",
]
