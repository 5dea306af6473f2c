"""
Order Use Cases

Order history for customers and status management for administrators.
"""

import logging

from storefront.config.settings import Settings
from storefront.core.domain import (
    AuthorizationException,
    EntityNotFoundException,
    Viewer,
    require_viewer,
)
from storefront.database import Database
from storefront.domains.ecommerce.domain.value_objects import (
    OrderStatus,
    PaymentMethod,
    PaymentStatus,
    validate_status_transition,
)
from storefront.domains.ecommerce.infrastructure.repositories import (
    SQLAlchemyOrderRepository,
    SQLAlchemyUserRepository,
)
from storefront.models.db import Order
from storefront.models.db.base import utcnow

logger = logging.getLogger(__name__)


class ListOrdersUseCase:
    def __init__(self, database: Database):
        self.database = database

    async def execute(self, viewer: Viewer | None) -> list[Order]:
        viewer = require_viewer(viewer)
        async with self.database.session() as session:
            return await SQLAlchemyOrderRepository(session).list_for_user(viewer.id)


class GetOrderUseCase:
    """Use Case: one of the caller's orders. Other users' orders are reported as missing."""

    def __init__(self, database: Database):
        self.database = database

    async def execute(self, viewer: Viewer | None, order_id: int) -> Order:
        viewer = require_viewer(viewer)
        async with self.database.session() as session:
            order = await SQLAlchemyOrderRepository(session).get_for_user(order_id, viewer.id)
        if order is None:
            raise EntityNotFoundException("Order", order_id)
        return order


class UpdateOrderStatusUseCase:
    """
    Use Case: Update Order Status

    Restricted to administrators. The status is always one of the known
    ``OrderStatus`` values; the transition table is enforced only when
    ORDER_STRICT_TRANSITIONS is enabled. A cash-on-delivery order becomes paid
    once delivered.
    """

    def __init__(self, database: Database, settings: Settings):
        self.database = database
        self.settings = settings

    async def execute(self, viewer: Viewer | None, order_id: int, status: OrderStatus) -> Order:
        """
        Raises:
            UnauthenticatedException: If the caller is anonymous.
            AuthorizationException: If the caller is not an administrator.
            EntityNotFoundException: If the order does not exist.
            InvalidOperationException: If strict transitions forbid the change.
        """
        viewer = require_viewer(viewer)
        async with self.database.session() as session:
            user = await SQLAlchemyUserRepository(session).get_by_id(viewer.id)
            if user is None or not user.is_admin:
                raise AuthorizationException("update_order_status", "order", viewer.id)

            order = await SQLAlchemyOrderRepository(session).get_by_id(order_id)
            if order is None:
                raise EntityNotFoundException("Order", order_id)

            current = OrderStatus(order.status)
            validate_status_transition(current, status, strict=self.settings.ORDER_STRICT_TRANSITIONS)

            order.status = status.value
            if status == OrderStatus.DELIVERED and order.payment_method == PaymentMethod.CASH_ON_DELIVERY.value:
                order.payment_status = PaymentStatus.PAID.value
            order.updated_at = utcnow()
            await session.flush()

        logger.info(f"Order {order.order_number} status: {current.value} -> {status.value} (by user {viewer.id})")
        return order
