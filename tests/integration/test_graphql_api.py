"""
Integration tests for the GraphQL API.

Most tests execute operations directly against the schema with a prepared
context; the HTTP tests go through the full FastAPI stack including the
bearer token middleware.
"""

import warnings

import httpx
import pytest

from storefront.api.graphql import GraphQLContext, schema
from storefront.core.app_factory import create_app


@pytest.fixture
def execute(container):
    """Run an operation as the given user (anonymous by default)."""

    async def _execute(query: str, variables: dict | None = None, viewer=None):
        return await schema.execute(
            query,
            variable_values=variables,
            context_value=GraphQLContext(container, viewer),
        )

    return _execute


def error_code(result) -> str:
    assert result.errors, "expected an error"
    return result.errors[0].extensions["code"]


@pytest.mark.integration
class TestCatalogOperations:
    @pytest.mark.asyncio
    async def test_products_page(self, execute, make_category, make_product):
        audio = await make_category("Audio")
        await make_product(name="Speaker", price=80.0, original_price=100.0, category_id=audio.id, age_minutes=5)
        await make_product(name="Cable", price=5.0, stock=0)

        result = await execute(
            """
            query Products($pagination: PaginationInput) {
              products(pagination: $pagination) {
                items { name price discountPercentage inStock category { name } }
                hasMore page limit
              }
            }
            """,
            {"pagination": {"page": 1, "limit": 1}},
        )

        assert result.errors is None
        page = result.data["products"]
        assert page["items"] == [
            {"name": "Cable", "price": 5.0, "discountPercentage": 0.0, "inStock": False, "category": None}
        ]
        assert (page["hasMore"], page["page"], page["limit"]) == (True, 1, 1)

    @pytest.mark.asyncio
    async def test_filters_and_search(self, execute, make_product):
        await make_product(name="Gaming Mouse", price=40.0, is_featured=True)
        await make_product(name="Office Mouse", price=15.0)

        result = await execute(
            """
            {
              products(filters: {search: "mouse", minPrice: 20}) { items { name } }
              featuredProducts { name }
              searchProducts(query: "office") { query count products { name } }
            }
            """
        )

        assert result.errors is None
        assert result.data["products"]["items"] == [{"name": "Gaming Mouse"}]
        assert result.data["featuredProducts"] == [{"name": "Gaming Mouse"}]
        assert result.data["searchProducts"] == {
            "query": "office",
            "count": 1,
            "products": [{"name": "Office Mouse"}],
        }

    @pytest.mark.asyncio
    async def test_inactive_product_reports_not_found(self, execute, make_product):
        product = await make_product(is_active=False)

        result = await execute("query P($id: Int!) { product(id: $id) { name } }", {"id": product.id})

        assert result.data is None
        assert error_code(result) == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_invalid_price_range(self, execute):
        result = await execute("{ products(filters: {minPrice: 50, maxPrice: 10}) { hasMore } }")

        assert error_code(result) == "VALIDATION_ERROR"


@pytest.mark.integration
class TestAccountOperations:
    @pytest.mark.asyncio
    async def test_register_then_me(self, execute, token_service):
        result = await execute(
            """
            mutation {
              register(input: {email: "Sara@Example.com", password: "long enough", firstName: "Sara", lastName: "Ali"}) {
                token
                user { id email firstName }
              }
            }
            """
        )

        assert result.errors is None
        payload = result.data["register"]
        assert payload["user"]["email"] == "sara@example.com"
        viewer = token_service.verify(payload["token"])

        me = await execute("{ me { email lastName } }", viewer=viewer)
        assert me.data["me"] == {"email": "sara@example.com", "lastName": "Ali"}

    @pytest.mark.asyncio
    async def test_me_anonymous(self, execute):
        result = await execute("{ me { id } }")

        assert error_code(result) == "UNAUTHENTICATED"

    @pytest.mark.asyncio
    async def test_login_failure(self, execute, make_user):
        await make_user("layla@example.com")

        result = await execute('mutation { login(input: {email: "layla@example.com", password: "wrong"}) { token } }')

        assert result.errors[0].message == "Invalid email or password"
        assert error_code(result) == "INVALID_CREDENTIALS"

    @pytest.mark.asyncio
    async def test_partial_profile_update(self, execute, make_user, viewer_of):
        user = await make_user()

        result = await execute(
            'mutation { updateProfile(input: {city: "Mecca"}) { firstName city } }',
            viewer=viewer_of(user),
        )

        assert result.data["updateProfile"] == {"firstName": "Layla", "city": "Mecca"}


@pytest.mark.integration
class TestShoppingOperations:
    @pytest.mark.asyncio
    async def test_cart_to_order(self, execute, make_user, make_product, viewer_of):
        user = await make_user()
        product = await make_product(name="Lamp", price=12.5, stock=3)
        viewer = viewer_of(user)

        added = await execute(
            "mutation A($id: Int!) { addToCart(input: {productId: $id, quantity: 2}) { id quantity lineTotal } }",
            {"id": product.id},
            viewer,
        )
        cart = await execute("{ cart { totalItems totalPrice items { product { name } } } }", viewer=viewer)
        order = await execute(
            """
            mutation {
              createOrder(input: {shippingAddress: "1 Palm St", shippingCity: "Riyadh", shippingPhone: "0500"}) {
                orderNumber status paymentMethod paymentStatus totalAmount shippingCountry
                items { productName productPrice quantity totalPrice }
              }
            }
            """,
            viewer=viewer,
        )

        assert added.data["addToCart"]["quantity"] == 2
        assert added.data["addToCart"]["lineTotal"] == 25.0
        assert cart.data["cart"] == {"totalItems": 2, "totalPrice": 25.0, "items": [{"product": {"name": "Lamp"}}]}
        assert order.errors is None
        created = order.data["createOrder"]
        assert created["orderNumber"].startswith("ORD-")
        assert (created["status"], created["paymentMethod"], created["paymentStatus"]) == (
            "PENDING",
            "CASH_ON_DELIVERY",
            "PENDING",
        )
        assert created["totalAmount"] == 25.0
        assert created["shippingCountry"] == "Saudi Arabia"
        assert created["items"] == [{"productName": "Lamp", "productPrice": 12.5, "quantity": 2, "totalPrice": 25.0}]

    @pytest.mark.asyncio
    async def test_empty_cart_order(self, execute, make_user, viewer_of):
        user = await make_user()

        result = await execute(
            'mutation { createOrder(input: {shippingAddress: "a", shippingCity: "b", shippingPhone: "c"}) { id } }',
            viewer=viewer_of(user),
        )

        assert result.errors[0].message == "Cart is empty"
        assert error_code(result) == "EMPTY_CART"

    @pytest.mark.asyncio
    async def test_cart_requires_identity(self, execute, make_product):
        product = await make_product()

        result = await execute(
            "mutation A($id: Int!) { addToCart(input: {productId: $id}) { id } }",
            {"id": product.id},
        )

        assert error_code(result) == "UNAUTHENTICATED"

    @pytest.mark.asyncio
    async def test_wishlist_conflict_and_clear_cart(self, execute, make_user, make_product, viewer_of):
        user = await make_user()
        product = await make_product()
        viewer = viewer_of(user)
        add = "mutation W($id: Int!) { addToWishlist(productId: $id) { product { id } } }"

        await execute(add, {"id": product.id}, viewer)
        duplicate = await execute(add, {"id": product.id}, viewer)
        cleared = await execute("mutation { clearCart }", viewer=viewer)

        assert error_code(duplicate) == "CONFLICT"
        assert duplicate.errors[0].message == "Product already in wishlist"
        assert cleared.data == {"clearCart": True}

    @pytest.mark.asyncio
    async def test_admin_status_update(self, execute, container, make_user, make_product, put_in_cart, viewer_of):
        customer = await make_user("customer@example.com")
        admin = await make_user("admin@example.com", is_admin=True)
        await put_in_cart(customer, await make_product(), 1)
        placed = await execute(
            'mutation { createOrder(input: {shippingAddress: "a", shippingCity: "b", shippingPhone: "c"}) { id } }',
            viewer=viewer_of(customer),
        )
        order_id = placed.data["createOrder"]["id"]
        mutation = "mutation S($id: Int!) { updateOrderStatus(id: $id, status: DELIVERED) { status paymentStatus } }"

        denied = await execute(mutation, {"id": order_id}, viewer_of(customer))
        allowed = await execute(mutation, {"id": order_id}, viewer_of(admin))

        assert error_code(denied) == "FORBIDDEN"
        assert allowed.data["updateOrderStatus"] == {"status": "DELIVERED", "paymentStatus": "PAID"}

    @pytest.mark.asyncio
    async def test_unknown_status_is_rejected_by_schema(self, execute, make_user, viewer_of):
        admin = await make_user(is_admin=True)

        result = await execute("mutation { updateOrderStatus(id: 1, status: LOST) { status } }", viewer=viewer_of(admin))

        assert result.errors
        assert result.data is None


@pytest.mark.integration
class TestReviewOperations:
    @pytest.mark.asyncio
    async def test_rating_out_of_range(self, execute, make_user, make_product, viewer_of):
        user = await make_user()
        product = await make_product()

        result = await execute(
            'mutation R($id: Int!) { createReview(input: {productId: $id, rating: 6, comment: "wow"}) { id } }',
            {"id": product.id},
            viewer_of(user),
        )

        assert error_code(result) == "VALIDATION_ERROR"
        assert result.errors[0].extensions["field"] == "rating"

    @pytest.mark.asyncio
    async def test_review_author_has_no_email(self, execute, make_user, make_product, viewer_of):
        user = await make_user()
        product = await make_product()
        await execute(
            'mutation R($id: Int!) { createReview(input: {productId: $id, rating: 5, comment: "great"}) { id } }',
            {"id": product.id},
            viewer_of(user),
        )

        listed = await execute(
            "query L($id: Int!) { productReviews(productId: $id) { rating isVerifiedPurchase user { firstName } } }",
            {"id": product.id},
        )
        leaked = await execute(
            "query L($id: Int!) { productReviews(productId: $id) { user { email } } }",
            {"id": product.id},
        )

        assert listed.data["productReviews"] == [
            {"rating": 5, "isVerifiedPurchase": False, "user": {"firstName": "Layla"}}
        ]
        assert leaked.errors


@pytest.mark.integration
class TestTextGenerationOperations:
    @pytest.mark.asyncio
    async def test_translate_text(self, execute, mock_llm):
        result = await execute('mutation { translateText(text: "Hello", from: "English", to: "Arabic") }')

        assert result.data == {"translateText": "Generated text"}
        assert "from English to Arabic" in mock_llm.generate.call_args.args[0]

    @pytest.mark.asyncio
    async def test_generate_description_default_language(self, execute, mock_llm, make_product):
        product = await make_product(name="Tent")

        result = await execute(
            "mutation G($id: Int!) { generateProductDescription(productId: $id) }",
            {"id": product.id},
        )

        assert result.data == {"generateProductDescription": "Generated text"}
        assert mock_llm.generate.call_args.args[0].endswith("in Arabic.")

    @pytest.mark.asyncio
    async def test_unexpected_errors_are_masked(self, execute, mock_llm):
        mock_llm.generate.side_effect = RuntimeError("socket exploded at 10.0.0.3")

        result = await execute('mutation { translateText(text: "Hi", from: "English", to: "French") }')

        assert result.errors[0].message == "Unexpected error."
        assert "10.0.0.3" not in str(result.errors[0].extensions)

    @pytest.mark.asyncio
    async def test_error_masking_is_registered_as_factory(self, execute, mock_llm):
        mock_llm.generate.side_effect = RuntimeError("boom")

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            result = await execute('mutation { translateText(text: "Hi", from: "English", to: "French") }')

        assert result.errors[0].message == "Unexpected error."
        assert not [w for w in caught if issubclass(w.category, DeprecationWarning) and "xtension" in str(w.message)]


@pytest.mark.integration
class TestHttpEndpoint:
    @pytest.fixture
    def app(self, settings, container):
        return create_app(settings, container)

    @pytest.mark.asyncio
    async def test_bearer_token_identifies_caller(self, app, make_user, token_service):
        user = await make_user()
        token = token_service.issue(user.id, user.email)

        async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as client:
            response = await client.post(
                "/graphql",
                json={"query": "{ me { email } }"},
                headers={"Authorization": f"Bearer {token}", "X-Correlation-ID": "abc123"},
            )

        assert response.status_code == 200
        assert response.json()["data"] == {"me": {"email": "layla@example.com"}}
        assert response.headers["X-Correlation-ID"] == "abc123"

    @pytest.mark.asyncio
    async def test_invalid_token_is_treated_as_anonymous(self, app, make_product):
        await make_product(name="Public")

        async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as client:
            catalog = await client.post(
                "/graphql",
                json={"query": "{ products { items { name } } }"},
                headers={"Authorization": "Bearer forged"},
            )
            me = await client.post(
                "/graphql",
                json={"query": "{ me { email } }"},
                headers={"Authorization": "Bearer forged"},
            )

        assert catalog.json()["data"] == {"products": {"items": [{"name": "Public"}]}}
        assert me.json()["errors"][0]["extensions"]["code"] == "UNAUTHENTICATED"

    @pytest.mark.asyncio
    async def test_health(self, app):
        async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as client:
            response = await client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok", "database": "ok", "environment": "test"}
