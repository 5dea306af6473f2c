"""
GraphQL schema

Resolvers translate typed inputs into validated requests and delegate to the
use cases of the dependency container. The caller identity is passed
explicitly from the context to every use case that needs it.
"""

from typing import Annotated, Optional

import strawberry
from strawberry.extensions import MaskErrors

from storefront.api.graphql import types
from storefront.api.graphql.context import Info
from storefront.api.graphql.enums import OrderStatus
from storefront.api.graphql.errors import UNEXPECTED_ERROR_MESSAGE, should_mask_error
from storefront.api.graphql.inputs import (
    AddToCartInput,
    CreateOrderInput,
    CreateReviewInput,
    LoginInput,
    PaginationInput,
    ProductFilterInput,
    RegisterInput,
    UpdateProfileInput,
)
from storefront.domains.ecommerce.application import dto


@strawberry.type
class Query:
    @strawberry.field(description="Profile of the authenticated caller")
    async def me(self, info: Info) -> types.User:
        context = info.context
        user = await context.container.create_get_current_user_use_case().execute(context.viewer)
        return types.User.from_model(user)

    @strawberry.field
    async def categories(self, info: Info) -> list[types.Category]:
        categories = await info.context.container.create_list_categories_use_case().execute()
        return [types.Category.from_model(c) for c in categories]

    @strawberry.field
    async def category(self, info: Info, id: int) -> types.Category:
        category = await info.context.container.create_get_category_use_case().execute(id)
        return types.Category.from_model(category)

    @strawberry.field(description="Active products, newest first")
    async def products(
        self,
        info: Info,
        filters: Optional[ProductFilterInput] = None,
        pagination: Optional[PaginationInput] = None,
    ) -> types.ProductPage:
        page = await info.context.container.create_list_products_use_case().execute(
            filters.to_request() if filters else None,
            pagination.to_request() if pagination else None,
        )
        return types.ProductPage.from_result(page)

    @strawberry.field
    async def product(self, info: Info, id: int) -> types.Product:
        product = await info.context.container.create_get_product_use_case().execute(id)
        return types.Product.from_model(product)

    @strawberry.field
    async def featured_products(self, info: Info) -> list[types.Product]:
        products = await info.context.container.create_get_featured_products_use_case().execute()
        return [types.Product.from_model(p) for p in products]

    @strawberry.field
    async def search_products(self, info: Info, query: str) -> types.SearchResult:
        result = await info.context.container.create_search_products_use_case().execute(query)
        return types.SearchResult.from_result(result)

    @strawberry.field
    async def cart(self, info: Info) -> types.CartSummary:
        context = info.context
        summary = await context.container.create_get_cart_use_case().execute(context.viewer)
        return types.CartSummary.from_result(summary)

    @strawberry.field
    async def wishlist(self, info: Info) -> list[types.WishlistItem]:
        context = info.context
        items = await context.container.create_get_wishlist_use_case().execute(context.viewer)
        return [types.WishlistItem.from_model(item) for item in items]

    @strawberry.field
    async def orders(self, info: Info) -> list[types.Order]:
        context = info.context
        orders = await context.container.create_list_orders_use_case().execute(context.viewer)
        return [types.Order.from_model(order) for order in orders]

    @strawberry.field
    async def order(self, info: Info, id: int) -> types.Order:
        context = info.context
        order = await context.container.create_get_order_use_case().execute(context.viewer, id)
        return types.Order.from_model(order)

    @strawberry.field
    async def product_reviews(self, info: Info, product_id: int) -> list[types.Review]:
        reviews = await info.context.container.create_list_product_reviews_use_case().execute(product_id)
        return [types.Review.from_model(review) for review in reviews]


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def register(self, info: Info, input: RegisterInput) -> types.AuthResponse:
        result = await info.context.container.create_register_user_use_case().execute(input.to_request())
        return types.AuthResponse.from_result(result)

    @strawberry.mutation
    async def login(self, info: Info, input: LoginInput) -> types.AuthResponse:
        result = await info.context.container.create_login_use_case().execute(input.to_request())
        return types.AuthResponse.from_result(result)

    @strawberry.mutation
    async def update_profile(self, info: Info, input: UpdateProfileInput) -> types.User:
        context = info.context
        user = await context.container.create_update_profile_use_case().execute(context.viewer, input.to_request())
        return types.User.from_model(user)

    @strawberry.mutation
    async def add_to_cart(self, info: Info, input: AddToCartInput) -> types.CartItem:
        context = info.context
        item = await context.container.create_add_to_cart_use_case().execute(context.viewer, input.to_request())
        return types.CartItem.from_model(item)

    @strawberry.mutation(description="Set the quantity of a cart line")
    async def update_cart_item(self, info: Info, id: int, quantity: int) -> types.CartItem:
        context = info.context
        request = dto.UpdateCartItemRequest.build(cart_item_id=id, quantity=quantity)
        item = await context.container.create_update_cart_item_use_case().execute(context.viewer, request)
        return types.CartItem.from_model(item)

    @strawberry.mutation
    async def remove_from_cart(self, info: Info, id: int) -> bool:
        context = info.context
        return await context.container.create_remove_from_cart_use_case().execute(context.viewer, id)

    @strawberry.mutation
    async def clear_cart(self, info: Info) -> bool:
        context = info.context
        return await context.container.create_clear_cart_use_case().execute(context.viewer)

    @strawberry.mutation
    async def add_to_wishlist(self, info: Info, product_id: int) -> types.WishlistItem:
        context = info.context
        item = await context.container.create_add_to_wishlist_use_case().execute(context.viewer, product_id)
        return types.WishlistItem.from_model(item)

    @strawberry.mutation
    async def remove_from_wishlist(self, info: Info, product_id: int) -> bool:
        context = info.context
        return await context.container.create_remove_from_wishlist_use_case().execute(context.viewer, product_id)

    @strawberry.mutation
    async def create_order(self, info: Info, input: CreateOrderInput) -> types.Order:
        context = info.context
        order = await context.container.create_create_order_use_case().execute(context.viewer, input.to_request())
        return types.Order.from_model(order)

    @strawberry.mutation(description="Administrators only")
    async def update_order_status(self, info: Info, id: int, status: OrderStatus) -> types.Order:
        context = info.context
        order = await context.container.create_update_order_status_use_case().execute(context.viewer, id, status)
        return types.Order.from_model(order)

    @strawberry.mutation
    async def create_review(self, info: Info, input: CreateReviewInput) -> types.Review:
        context = info.context
        review = await context.container.create_create_review_use_case().execute(context.viewer, input.to_request())
        return types.Review.from_model(review)

    @strawberry.mutation
    async def translate_text(
        self,
        info: Info,
        text: str,
        from_: Annotated[str, strawberry.argument(name="from")],
        to: str,
    ) -> str:
        request = dto.TranslateTextRequest.build(text=text, source_language=from_, target_language=to)
        return await info.context.container.create_translate_text_use_case().execute(request)

    @strawberry.mutation
    async def generate_product_description(
        self,
        info: Info,
        product_id: int,
        language: str = "Arabic",
    ) -> str:
        request = dto.GenerateDescriptionRequest.build(product_id=product_id, language=language)
        return await info.context.container.create_generate_product_description_use_case().execute(request)


def create_schema() -> strawberry.Schema:
    return strawberry.Schema(
        query=Query,
        mutation=Mutation,
        extensions=[
            lambda: MaskErrors(should_mask_error=should_mask_error, error_message=UNEXPECTED_ERROR_MESSAGE),
        ],
    )


schema = create_schema()
