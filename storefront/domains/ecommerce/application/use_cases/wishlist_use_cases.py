"""
Wishlist Use Cases
"""

import logging

from storefront.core.domain import (
    DuplicateEntityException,
    EntityNotFoundException,
    Viewer,
    require_viewer,
)
from storefront.database import Database
from storefront.domains.ecommerce.infrastructure.repositories import (
    SQLAlchemyProductRepository,
    SQLAlchemyWishlistRepository,
)
from storefront.models.db import WishlistItem

logger = logging.getLogger(__name__)


class GetWishlistUseCase:
    def __init__(self, database: Database):
        self.database = database

    async def execute(self, viewer: Viewer | None) -> list[WishlistItem]:
        viewer = require_viewer(viewer)
        async with self.database.session() as session:
            return await SQLAlchemyWishlistRepository(session).list_for_user(viewer.id)


class AddToWishlistUseCase:
    """
    Use Case: Add To Wishlist

    A product can be saved once per user; a second attempt is a conflict.
    """

    def __init__(self, database: Database):
        self.database = database

    async def execute(self, viewer: Viewer | None, product_id: int) -> WishlistItem:
        """
        Raises:
            EntityNotFoundException: If the product is missing or inactive.
            DuplicateEntityException: If the product is already in the wishlist.
        """
        viewer = require_viewer(viewer)
        async with self.database.session() as session:
            product = await SQLAlchemyProductRepository(session).get_active(product_id)
            if product is None:
                raise EntityNotFoundException("Product", product_id)

            wishlist = SQLAlchemyWishlistRepository(session)
            if await wishlist.exists(viewer.id, product_id):
                raise DuplicateEntityException(
                    "WishlistItem", "product_id", product_id, "Product already in wishlist"
                )

            item = WishlistItem(user_id=viewer.id, product_id=product_id)
            item.product = product
            await wishlist.add(item)

        logger.info(f"Wishlist updated: user={viewer.id}, product={product_id}")
        return item


class RemoveFromWishlistUseCase:
    def __init__(self, database: Database):
        self.database = database

    async def execute(self, viewer: Viewer | None, product_id: int) -> bool:
        viewer = require_viewer(viewer)
        async with self.database.session() as session:
            return await SQLAlchemyWishlistRepository(session).delete(viewer.id, product_id)
