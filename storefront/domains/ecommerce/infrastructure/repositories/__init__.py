"""
E-commerce Repositories

SQLAlchemy repositories. Each takes the AsyncSession of the current unit of
work and never commits on its own.
"""

from .cart_repository import SQLAlchemyCartRepository
from .category_repository import SQLAlchemyCategoryRepository
from .order_repository import SQLAlchemyOrderRepository
from .product_repository import SQLAlchemyProductRepository
from .review_repository import SQLAlchemyReviewRepository
from .user_repository import SQLAlchemyUserRepository
from .wishlist_repository import SQLAlchemyWishlistRepository

__all__ = [
    "SQLAlchemyCartRepository",
    "SQLAlchemyCategoryRepository",
    "SQLAlchemyOrderRepository",
    "SQLAlchemyProductRepository",
    "SQLAlchemyReviewRepository",
    "SQLAlchemyUserRepository",
    "SQLAlchemyWishlistRepository",
]
