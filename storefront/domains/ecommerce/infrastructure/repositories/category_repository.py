"""
Category Repository Implementation
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.models.db import Category


class SQLAlchemyCategoryRepository:
    """Read-only access to categories."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_all(self) -> list[Category]:
        result = await self.session.execute(select(Category).order_by(Category.name))
        return list(result.scalars().all())

    async def get_by_id(self, category_id: int) -> Category | None:
        return await self.session.get(Category, category_id)
