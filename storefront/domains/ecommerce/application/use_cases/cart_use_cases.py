"""
Cart Use Cases

Per-user cart management with stock validation.
"""

import logging

from storefront.core.domain import (
    EntityNotFoundException,
    InsufficientStockException,
    Viewer,
    require_viewer,
)
from storefront.database import Database
from storefront.domains.ecommerce.application.dto import AddToCartRequest, CartSummary, UpdateCartItemRequest
from storefront.domains.ecommerce.infrastructure.repositories import (
    SQLAlchemyCartRepository,
    SQLAlchemyProductRepository,
)
from storefront.models.db import CartItem
from storefront.models.db.base import utcnow

logger = logging.getLogger(__name__)


class GetCartUseCase:
    def __init__(self, database: Database):
        self.database = database

    async def execute(self, viewer: Viewer | None) -> CartSummary:
        viewer = require_viewer(viewer)
        async with self.database.session() as session:
            items = await SQLAlchemyCartRepository(session).list_for_user(viewer.id)
        return CartSummary(items=items)


class AddToCartUseCase:
    """
    Use Case: Add To Cart

    Re-adding a product already in the cart increments its quantity instead of
    creating a second line. Stock is checked against the requested quantity.
    """

    def __init__(self, database: Database):
        self.database = database

    async def execute(self, viewer: Viewer | None, request: AddToCartRequest) -> CartItem:
        """
        Raises:
            UnauthenticatedException: If the caller is anonymous.
            EntityNotFoundException: If the product is missing or inactive.
            InsufficientStockException: If stock is below the requested quantity.
        """
        viewer = require_viewer(viewer)
        async with self.database.session() as session:
            product = await SQLAlchemyProductRepository(session).get_active(request.product_id)
            if product is None:
                raise EntityNotFoundException("Product", request.product_id)
            if product.stock_quantity < request.quantity:
                raise InsufficientStockException(product.id, request.quantity, product.stock_quantity)

            cart = SQLAlchemyCartRepository(session)
            item = await cart.get_by_product(viewer.id, product.id)
            if item is None:
                item = await cart.add(CartItem(user_id=viewer.id, product_id=product.id, quantity=request.quantity))
            else:
                item.quantity = item.quantity + request.quantity
                item.updated_at = utcnow()
                await session.flush()

            item = await cart.get_for_user(item.id, viewer.id, refresh=True)

        logger.info(f"Cart updated: user={viewer.id}, product={request.product_id}, quantity={item.quantity}")
        return item


class UpdateCartItemUseCase:
    """Use Case: set a cart line's quantity (absolute, not additive)."""

    def __init__(self, database: Database):
        self.database = database

    async def execute(self, viewer: Viewer | None, request: UpdateCartItemRequest) -> CartItem:
        viewer = require_viewer(viewer)
        async with self.database.session() as session:
            cart = SQLAlchemyCartRepository(session)
            item = await cart.get_for_user(request.cart_item_id, viewer.id)
            if item is None:
                raise EntityNotFoundException("CartItem", request.cart_item_id)
            if item.product.stock_quantity < request.quantity:
                raise InsufficientStockException(item.product_id, request.quantity, item.product.stock_quantity)

            item.quantity = request.quantity
            await session.flush()
        return item


class RemoveFromCartUseCase:
    def __init__(self, database: Database):
        self.database = database

    async def execute(self, viewer: Viewer | None, cart_item_id: int) -> bool:
        """Delete one of the caller's cart lines. Returns whether a line was removed."""
        viewer = require_viewer(viewer)
        async with self.database.session() as session:
            return await SQLAlchemyCartRepository(session).delete_for_user(cart_item_id, viewer.id)


class ClearCartUseCase:
    def __init__(self, database: Database):
        self.database = database

    async def execute(self, viewer: Viewer | None) -> bool:
        viewer = require_viewer(viewer)
        async with self.database.session() as session:
            await SQLAlchemyCartRepository(session).clear(viewer.id)
        return True
