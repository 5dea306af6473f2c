"""
Create Order Use Case

Converts the caller's cart into an order in a single unit of work.
"""

import logging

from storefront.config.settings import Settings
from storefront.core.domain import (
    EmptyCartException,
    EntityNotFoundException,
    InsufficientStockException,
    Viewer,
    require_viewer,
)
from storefront.database import Database
from storefront.domains.ecommerce.application.dto import CreateOrderRequest
from storefront.domains.ecommerce.domain.services import PricedLine, generate_order_number, order_total
from storefront.domains.ecommerce.domain.value_objects import OrderStatus, PaymentStatus
from storefront.domains.ecommerce.infrastructure.repositories import (
    SQLAlchemyCartRepository,
    SQLAlchemyOrderRepository,
    SQLAlchemyProductRepository,
)
from storefront.models.db import Order, OrderItem

logger = logging.getLogger(__name__)


class CreateOrderUseCase:
    """
    Use Case: Create Order

    Steps, all inside one transaction:
    - Lock the products referenced by the cart and read their live price and stock
    - Reject an empty cart, inactive products and lines exceeding stock
    - Insert the order with an immutable item snapshot per cart line
    - Decrement stock with a guarded update that refuses to go below zero
    - Delete the cart

    Any failure rolls the whole unit of work back: no order, no stock change,
    cart untouched.
    """

    def __init__(self, database: Database, settings: Settings):
        """
        Initialize use case with dependencies.

        Args:
            database: Store client providing the unit of work
            settings: Application settings (default shipping country)
        """
        self.database = database
        self.settings = settings

    async def execute(self, viewer: Viewer | None, request: CreateOrderRequest) -> Order:
        """
        Create an order from the caller's cart.

        Raises:
            UnauthenticatedException: If the caller is anonymous.
            EmptyCartException: If the cart has no lines.
            EntityNotFoundException: If a cart line references an inactive product.
            InsufficientStockException: If any line exceeds the available stock.
        """
        viewer = require_viewer(viewer)

        async with self.database.session() as session:
            cart = SQLAlchemyCartRepository(session)
            products = SQLAlchemyProductRepository(session)
            orders = SQLAlchemyOrderRepository(session)

            lines = await cart.lock_checkout_lines(viewer.id)
            if not lines:
                raise EmptyCartException(viewer.id)

            priced: list[PricedLine] = []
            for item, product in lines:
                if not product.is_active:
                    raise EntityNotFoundException("Product", product.id)
                if product.stock_quantity < item.quantity:
                    raise InsufficientStockException(product.id, item.quantity, product.stock_quantity)
                priced.append(
                    PricedLine(
                        product_id=product.id,
                        product_name=product.name,
                        unit_price=product.price,
                        quantity=item.quantity,
                    )
                )

            order = Order(
                order_number=generate_order_number(),
                user_id=viewer.id,
                status=OrderStatus.PENDING.value,
                total_amount=order_total(priced),
                payment_method=request.payment_method.value,
                payment_status=PaymentStatus.PENDING.value,
                shipping_address=request.shipping_address,
                shipping_city=request.shipping_city,
                shipping_country=request.shipping_country or self.settings.DEFAULT_SHIPPING_COUNTRY,
                shipping_phone=request.shipping_phone,
                notes=request.notes,
                items=[
                    OrderItem(
                        product_id=line.product_id,
                        product_name=line.product_name,
                        product_price=line.unit_price,
                        quantity=line.quantity,
                        total_price=line.total,
                    )
                    for line in priced
                ],
            )
            await orders.add(order)

            for line in priced:
                if not await products.decrement_stock(line.product_id, line.quantity):
                    raise InsufficientStockException(line.product_id, line.quantity)

            await cart.clear(viewer.id)

        logger.info(
            f"Order created: {order.order_number} for user {viewer.id} "
            f"({len(priced)} lines, total={order.total_amount})"
        )
        return order
