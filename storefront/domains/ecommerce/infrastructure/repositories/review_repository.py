"""
Review Repository Implementation
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from storefront.models.db import Review


class SQLAlchemyReviewRepository:
    """Data access for product reviews."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def add(self, review: Review) -> Review:
        self.session.add(review)
        await self.session.flush()
        return review

    async def list_for_product(self, product_id: int) -> list[Review]:
        """Reviews of a product with their authors, newest first."""
        result = await self.session.execute(
            select(Review)
            .options(joinedload(Review.user))
            .where(Review.product_id == product_id)
            .order_by(Review.created_at.desc(), Review.id.desc())
        )
        return list(result.scalars().all())
