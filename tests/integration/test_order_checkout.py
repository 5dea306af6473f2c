"""
Integration tests for order creation.

Checkout must be all-or-nothing: on any failure there is no order, no stock
change and the cart is left as it was.
"""

import re

import pytest

from storefront.core.domain import (
    EmptyCartException,
    EntityNotFoundException,
    InsufficientStockException,
    UnauthenticatedException,
)
from storefront.domains.ecommerce.application.dto import CreateOrderRequest
from storefront.domains.ecommerce.infrastructure.repositories import (
    SQLAlchemyCartRepository,
    SQLAlchemyProductRepository,
)
from storefront.models.db import CartItem, Order, OrderItem, Product


@pytest.fixture
def shipping() -> CreateOrderRequest:
    return CreateOrderRequest.build(
        shipping_address="12 Olaya St",
        shipping_city="Riyadh",
        shipping_phone="+966500000000",
        notes="Leave at the door",
    )


@pytest.mark.integration
class TestCreateOrder:
    @pytest.mark.asyncio
    async def test_cart_becomes_order(
        self, container, make_user, make_product, put_in_cart, viewer_of, shipping, fetch, count_rows
    ):
        # Arrange
        user = await make_user()
        lamp = await make_product(name="Lamp", price=10.0, stock=5)
        bulb = await make_product(name="Bulb", price=5.0, stock=5)
        await put_in_cart(user, lamp, 2)
        await put_in_cart(user, bulb, 1)

        # Act
        order = await container.create_create_order_use_case().execute(viewer_of(user), shipping)

        # Assert
        assert re.fullmatch(r"ORD-\d{4}-[0-9A-F]{12}", order.order_number)
        assert order.total_amount == 25.0
        assert order.status == "pending"
        assert order.payment_method == "cash_on_delivery"
        assert order.payment_status == "pending"
        assert order.shipping_country == "Saudi Arabia"
        assert order.notes == "Leave at the door"
        assert sorted((i.product_name, i.product_price, i.quantity, i.total_price) for i in order.items) == [
            ("Bulb", 5.0, 1, 5.0),
            ("Lamp", 10.0, 2, 20.0),
        ]
        assert (await fetch(Product, lamp.id)).stock_quantity == 3
        assert (await fetch(Product, bulb.id)).stock_quantity == 4
        assert await count_rows(CartItem, CartItem.user_id == user.id) == 0

    @pytest.mark.asyncio
    async def test_empty_cart(self, container, make_user, viewer_of, shipping, count_rows):
        user = await make_user()

        with pytest.raises(EmptyCartException) as exc_info:
            await container.create_create_order_use_case().execute(viewer_of(user), shipping)

        assert exc_info.value.code == "EMPTY_CART"
        assert exc_info.value.message == "Cart is empty"
        assert await count_rows(Order) == 0

    @pytest.mark.asyncio
    async def test_anonymous_caller(self, container, shipping):
        with pytest.raises(UnauthenticatedException):
            await container.create_create_order_use_case().execute(None, shipping)

    @pytest.mark.asyncio
    async def test_last_unit_goes_to_first_buyer(
        self, container, make_user, make_product, put_in_cart, viewer_of, shipping, fetch, count_rows
    ):
        first = await make_user("first@example.com")
        second = await make_user("second@example.com")
        product = await make_product(stock=1)
        await put_in_cart(first, product, 1)
        await put_in_cart(second, product, 1)
        create_order = container.create_create_order_use_case()

        await create_order.execute(viewer_of(first), shipping)
        with pytest.raises(InsufficientStockException) as exc_info:
            await create_order.execute(viewer_of(second), shipping)

        assert exc_info.value.available == 0
        assert (await fetch(Product, product.id)).stock_quantity == 0
        assert await count_rows(Order) == 1
        assert await count_rows(CartItem, CartItem.user_id == second.id) == 1

    @pytest.mark.asyncio
    async def test_failure_rolls_everything_back(
        self, container, make_user, make_product, put_in_cart, viewer_of, shipping, fetch, count_rows, monkeypatch
    ):
        user = await make_user()
        product = await make_product(stock=5)
        await put_in_cart(user, product, 2)

        async def broken_clear(self, user_id):
            raise RuntimeError("connection lost")

        monkeypatch.setattr(SQLAlchemyCartRepository, "clear", broken_clear)

        with pytest.raises(RuntimeError):
            await container.create_create_order_use_case().execute(viewer_of(user), shipping)

        assert await count_rows(Order) == 0
        assert await count_rows(OrderItem) == 0
        assert (await fetch(Product, product.id)).stock_quantity == 5
        assert await count_rows(CartItem, CartItem.user_id == user.id) == 1

    @pytest.mark.asyncio
    async def test_one_short_line_fails_the_whole_order(
        self, container, make_user, make_product, put_in_cart, viewer_of, shipping, fetch, count_rows
    ):
        user = await make_user()
        plenty = await make_product(name="Plenty", stock=10)
        scarce = await make_product(name="Scarce", stock=1)
        await put_in_cart(user, plenty, 3)
        await put_in_cart(user, scarce, 2)

        with pytest.raises(InsufficientStockException) as exc_info:
            await container.create_create_order_use_case().execute(viewer_of(user), shipping)

        assert exc_info.value.product_id == scarce.id
        assert (await fetch(Product, plenty.id)).stock_quantity == 10
        assert await count_rows(Order) == 0
        assert await count_rows(CartItem) == 2

    @pytest.mark.asyncio
    async def test_inactive_product_in_cart(
        self, container, make_user, make_product, put_in_cart, viewer_of, shipping, count_rows
    ):
        user = await make_user()
        product = await make_product(is_active=False)
        await put_in_cart(user, product, 1)

        with pytest.raises(EntityNotFoundException):
            await container.create_create_order_use_case().execute(viewer_of(user), shipping)

        assert await count_rows(Order) == 0

    @pytest.mark.asyncio
    async def test_items_keep_checkout_price(
        self, container, database, make_user, make_product, put_in_cart, viewer_of, shipping
    ):
        user = await make_user()
        product = await make_product(name="Kettle", price=30.0)
        await put_in_cart(user, product, 1)
        order = await container.create_create_order_use_case().execute(viewer_of(user), shipping)

        async with database.session() as session:
            stored = await session.get(Product, product.id)
            stored.price = 45.0
            stored.name = "Kettle Pro"

        reloaded = await container.create_get_order_use_case().execute(viewer_of(user), order.id)
        assert reloaded.items[0].product_name == "Kettle"
        assert reloaded.items[0].product_price == 30.0
        assert reloaded.total_amount == 30.0


@pytest.mark.integration
class TestStockDecrement:
    @pytest.mark.asyncio
    async def test_guarded_decrement_never_goes_negative(self, database, make_product, fetch):
        product = await make_product(stock=2)

        async with database.session() as session:
            products = SQLAlchemyProductRepository(session)
            assert await products.decrement_stock(product.id, 2) is True
            assert await products.decrement_stock(product.id, 1) is False

        assert (await fetch(Product, product.id)).stock_quantity == 0
