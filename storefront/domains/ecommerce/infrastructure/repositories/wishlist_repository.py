"""
Wishlist Repository Implementation
"""

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from storefront.core.domain import DuplicateEntityException
from storefront.models.db import Product, WishlistItem


class SQLAlchemyWishlistRepository:
    """Data access for wishlist entries."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_for_user(self, user_id: int) -> list[WishlistItem]:
        result = await self.session.execute(
            select(WishlistItem)
            .options(selectinload(WishlistItem.product).selectinload(Product.category))
            .where(WishlistItem.user_id == user_id)
            .order_by(WishlistItem.created_at.desc())
        )
        return list(result.scalars().all())

    async def exists(self, user_id: int, product_id: int) -> bool:
        result = await self.session.execute(
            select(WishlistItem.id).where(WishlistItem.user_id == user_id, WishlistItem.product_id == product_id)
        )
        return result.first() is not None

    async def add(self, item: WishlistItem) -> WishlistItem:
        """
        Insert a wishlist entry.

        Raises:
            DuplicateEntityException: If the pair was inserted concurrently.
        """
        self.session.add(item)
        try:
            await self.session.flush()
        except IntegrityError as e:
            raise DuplicateEntityException(
                "WishlistItem", "product_id", item.product_id, "Product already in wishlist"
            ) from e
        return item

    async def delete(self, user_id: int, product_id: int) -> bool:
        result = await self.session.execute(
            delete(WishlistItem).where(WishlistItem.user_id == user_id, WishlistItem.product_id == product_id)
        )
        return result.rowcount > 0
