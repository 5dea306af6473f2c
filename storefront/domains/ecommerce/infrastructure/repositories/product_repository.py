"""
Product Repository Implementation

Parameterized filtering and pagination over active products, plus the guarded
stock decrement used at checkout.
"""

import logging

from sqlalchemy import Select, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from storefront.models.db import Product

logger = logging.getLogger(__name__)


class SQLAlchemyProductRepository:
    """
    SQLAlchemy implementation of product repository.

    Every read goes through ``_active_products`` so inactive products are never
    returned to callers.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _active_products(self) -> Select:
        return select(Product).options(selectinload(Product.category)).where(Product.is_active.is_(True))

    async def get_active(self, product_id: int) -> Product | None:
        """Get an active product by ID, None when missing or inactive."""
        result = await self.session.execute(self._active_products().where(Product.id == product_id))
        return result.scalar_one_or_none()

    async def find(
        self,
        *,
        category_id: int | None = None,
        search: str | None = None,
        min_price: float | None = None,
        max_price: float | None = None,
        is_featured: bool | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[Product]:
        """
        Find active products matching every supplied filter, newest first.

        Args:
            category_id: Exact category match
            search: Case-insensitive substring of name or description
            min_price: Inclusive lower price bound
            max_price: Inclusive upper price bound
            is_featured: Featured flag match
            limit: Maximum rows, no limit when None
            offset: Rows to skip

        Returns:
            List of products
        """
        query = self._active_products()

        if category_id is not None:
            query = query.where(Product.category_id == category_id)
        if search:
            pattern = f"%{search}%"
            query = query.where(or_(Product.name.ilike(pattern), Product.description.ilike(pattern)))
        if min_price is not None:
            query = query.where(Product.price >= min_price)
        if max_price is not None:
            query = query.where(Product.price <= max_price)
        if is_featured is not None:
            query = query.where(Product.is_featured.is_(is_featured))

        query = query.order_by(Product.created_at.desc())
        if limit is not None:
            query = query.limit(limit).offset(offset)

        try:
            result = await self.session.execute(query)
            return list(result.scalars().all())
        except Exception as e:
            logger.error(f"Error finding products: {e}")
            raise

    async def decrement_stock(self, product_id: int, quantity: int) -> bool:
        """
        Decrement stock only if enough units remain.

        Returns:
            False when the row was not updated, i.e. the decrement would have
            taken stock below zero or the product no longer exists.
        """
        result = await self.session.execute(
            update(Product)
            .where(Product.id == product_id, Product.stock_quantity >= quantity)
            .values(stock_quantity=Product.stock_quantity - quantity)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1
