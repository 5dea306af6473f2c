"""
Order Repository Implementation

SQLAlchemy persistence for orders and their item snapshots.
"""

import logging

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from storefront.domains.ecommerce.domain.value_objects import OrderStatus
from storefront.models.db import Order, OrderItem

logger = logging.getLogger(__name__)


class SQLAlchemyOrderRepository:
    """
    SQLAlchemy implementation of order repository.

    Handles all order data persistence operations.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add(self, order: Order) -> Order:
        """Insert an order together with its items."""
        self.session.add(order)
        await self.session.flush()
        return order

    async def get_by_id(self, order_id: int) -> Order | None:
        result = await self.session.execute(
            select(Order).options(selectinload(Order.items)).where(Order.id == order_id)
        )
        return result.scalar_one_or_none()

    async def get_for_user(self, order_id: int, user_id: int) -> Order | None:
        result = await self.session.execute(
            select(Order).options(selectinload(Order.items)).where(Order.id == order_id, Order.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def list_for_user(self, user_id: int) -> list[Order]:
        """Orders of a user, newest first."""
        try:
            result = await self.session.execute(
                select(Order)
                .options(selectinload(Order.items))
                .where(Order.user_id == user_id)
                .order_by(Order.created_at.desc(), Order.id.desc())
            )
            return list(result.scalars().all())
        except Exception as e:
            logger.error(f"Error getting orders for user {user_id}: {e}")
            raise

    async def has_delivered_purchase(self, user_id: int, product_id: int) -> bool:
        """Whether the user has a delivered order containing the product."""
        query = select(
            exists().where(
                OrderItem.order_id == Order.id,
                Order.user_id == user_id,
                OrderItem.product_id == product_id,
                Order.status == OrderStatus.DELIVERED.value,
            )
        )
        return bool(await self.session.scalar(query))
