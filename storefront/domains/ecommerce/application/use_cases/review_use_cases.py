"""
Review Use Cases
"""

import logging

from storefront.core.domain import EntityNotFoundException, Viewer, require_viewer
from storefront.database import Database
from storefront.domains.ecommerce.application.dto import CreateReviewRequest
from storefront.domains.ecommerce.infrastructure.repositories import (
    SQLAlchemyOrderRepository,
    SQLAlchemyProductRepository,
    SQLAlchemyReviewRepository,
    SQLAlchemyUserRepository,
)
from storefront.models.db import Review

logger = logging.getLogger(__name__)


class CreateReviewUseCase:
    """
    Use Case: Create Review

    The verified-purchase flag is derived from the reviewer's delivered orders,
    never taken from the client. Rating bounds are enforced by
    ``CreateReviewRequest``.
    """

    def __init__(self, database: Database):
        self.database = database

    async def execute(self, viewer: Viewer | None, request: CreateReviewRequest) -> Review:
        viewer = require_viewer(viewer)
        async with self.database.session() as session:
            if await SQLAlchemyProductRepository(session).get_active(request.product_id) is None:
                raise EntityNotFoundException("Product", request.product_id)

            author = await SQLAlchemyUserRepository(session).get_by_id(viewer.id)
            if author is None:
                raise EntityNotFoundException("User", viewer.id)

            verified = await SQLAlchemyOrderRepository(session).has_delivered_purchase(viewer.id, request.product_id)
            review = Review(
                user_id=viewer.id,
                product_id=request.product_id,
                rating=request.rating,
                title=request.title,
                comment=request.comment,
                is_verified_purchase=verified,
            )
            review.user = author
            await SQLAlchemyReviewRepository(session).add(review)

        logger.info(f"Review {review.id} created for product {request.product_id} (verified={verified})")
        return review


class ListProductReviewsUseCase:
    def __init__(self, database: Database):
        self.database = database

    async def execute(self, product_id: int) -> list[Review]:
        async with self.database.session() as session:
            return await SQLAlchemyReviewRepository(session).list_for_product(product_id)
