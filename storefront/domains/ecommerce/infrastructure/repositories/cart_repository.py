"""
Cart Repository Implementation
"""

import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from storefront.models.db import CartItem, Product

logger = logging.getLogger(__name__)


class SQLAlchemyCartRepository:
    """Data access for cart lines, always scoped to a user."""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _with_product(self):
        return select(CartItem).options(selectinload(CartItem.product).selectinload(Product.category))

    async def list_for_user(self, user_id: int) -> list[CartItem]:
        """Cart lines with their products, most recently touched first."""
        result = await self.session.execute(
            self._with_product().where(CartItem.user_id == user_id).order_by(CartItem.created_at.desc())
        )
        return list(result.scalars().all())

    async def get_for_user(self, item_id: int, user_id: int, refresh: bool = False) -> CartItem | None:
        query = self._with_product().where(CartItem.id == item_id, CartItem.user_id == user_id)
        if refresh:
            query = query.execution_options(populate_existing=True)
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def get_by_product(self, user_id: int, product_id: int) -> CartItem | None:
        result = await self.session.execute(
            select(CartItem).where(CartItem.user_id == user_id, CartItem.product_id == product_id)
        )
        return result.scalar_one_or_none()

    async def add(self, item: CartItem) -> CartItem:
        self.session.add(item)
        await self.session.flush()
        return item

    async def lock_checkout_lines(self, user_id: int) -> list[tuple[CartItem, Product]]:
        """
        Cart lines joined with their live products, locking both.

        A concurrent checkout of the same cart blocks on the cart rows and then
        finds them deleted. Rows are locked in product id order so checkouts
        sharing products acquire locks in the same order.
        """
        result = await self.session.execute(
            select(CartItem, Product)
            .join(Product, CartItem.product_id == Product.id)
            .where(CartItem.user_id == user_id)
            .order_by(Product.id)
            .with_for_update(of=[CartItem, Product])
        )
        return [(item, product) for item, product in result.all()]

    async def delete_for_user(self, item_id: int, user_id: int) -> bool:
        result = await self.session.execute(
            delete(CartItem).where(CartItem.id == item_id, CartItem.user_id == user_id)
        )
        return result.rowcount > 0

    async def clear(self, user_id: int) -> int:
        """Delete every cart line of the user. Returns deleted rows."""
        result = await self.session.execute(delete(CartItem).where(CartItem.user_id == user_id))
        logger.debug(f"Cleared {result.rowcount} cart lines for user {user_id}")
        return result.rowcount
