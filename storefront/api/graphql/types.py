"""
GraphQL object types.

Each type is built from its ORM model with ``from_model``; relationships are
expected to be loaded by the repositories.
"""

from datetime import datetime
from typing import Optional

import strawberry

from storefront.api.graphql.enums import OrderStatus, PaymentMethod, PaymentStatus
from storefront.domains.ecommerce.application import dto
from storefront.models import db


@strawberry.type
class User:
    id: int
    email: str
    first_name: str
    last_name: str
    phone: Optional[str]
    address: Optional[str]
    city: Optional[str]
    country: Optional[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, model: db.User) -> "User":
        return cls(
            id=model.id,
            email=model.email,
            first_name=model.first_name,
            last_name=model.last_name,
            phone=model.phone,
            address=model.address,
            city=model.city,
            country=model.country,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


@strawberry.type(description="Public profile of a review author")
class ReviewAuthor:
    id: int
    first_name: str
    last_name: str


@strawberry.type
class AuthResponse:
    token: str
    user: User

    @classmethod
    def from_result(cls, result: dto.AuthResult) -> "AuthResponse":
        return cls(token=result.token, user=User.from_model(result.user))


@strawberry.type
class Category:
    id: int
    name: str
    description: Optional[str]
    image_url: Optional[str]
    parent_id: Optional[int]
    created_at: datetime

    @classmethod
    def from_model(cls, model: db.Category) -> "Category":
        return cls(
            id=model.id,
            name=model.name,
            description=model.description,
            image_url=model.image_url,
            parent_id=model.parent_id,
            created_at=model.created_at,
        )


@strawberry.type
class Product:
    id: int
    name: str
    price: float
    original_price: Optional[float]
    discount_percentage: float
    category_id: Optional[int]
    category: Optional[Category]
    description: Optional[str]
    short_description: Optional[str]
    image_url: Optional[str]
    stock_quantity: int
    in_stock: bool
    sku: Optional[str]
    weight: Optional[float]
    dimensions: Optional[str]
    is_active: bool
    is_featured: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, model: db.Product) -> "Product":
        return cls(
            id=model.id,
            name=model.name,
            price=model.price,
            original_price=model.original_price,
            discount_percentage=model.discount_percentage,
            category_id=model.category_id,
            category=Category.from_model(model.category) if model.category else None,
            description=model.description,
            short_description=model.short_description,
            image_url=model.image_url,
            stock_quantity=model.stock_quantity,
            in_stock=model.is_in_stock,
            sku=model.sku,
            weight=model.weight,
            dimensions=model.dimensions,
            is_active=model.is_active,
            is_featured=model.is_featured,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


@strawberry.type
class ProductPage:
    items: list[Product]
    has_more: bool
    page: Optional[int]
    limit: Optional[int]

    @classmethod
    def from_result(cls, page: dto.ProductPage) -> "ProductPage":
        return cls(
            items=[Product.from_model(p) for p in page.items],
            has_more=page.has_more,
            page=page.page,
            limit=page.limit,
        )


@strawberry.type
class SearchResult:
    products: list[Product]
    count: int
    query: str

    @classmethod
    def from_result(cls, result: dto.SearchResult) -> "SearchResult":
        return cls(
            products=[Product.from_model(p) for p in result.products],
            count=result.count,
            query=result.query,
        )


@strawberry.type
class CartItem:
    id: int
    user_id: int
    product_id: int
    product: Product
    quantity: int
    line_total: float
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, model: db.CartItem) -> "CartItem":
        return cls(
            id=model.id,
            user_id=model.user_id,
            product_id=model.product_id,
            product=Product.from_model(model.product),
            quantity=model.quantity,
            line_total=round(model.line_total, 2),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


@strawberry.type
class CartSummary:
    items: list[CartItem]
    total_items: int
    total_price: float

    @classmethod
    def from_result(cls, summary: dto.CartSummary) -> "CartSummary":
        return cls(
            items=[CartItem.from_model(item) for item in summary.items],
            total_items=summary.total_items,
            total_price=summary.total_price,
        )


@strawberry.type
class WishlistItem:
    id: int
    user_id: int
    product_id: int
    product: Product
    created_at: datetime

    @classmethod
    def from_model(cls, model: db.WishlistItem) -> "WishlistItem":
        return cls(
            id=model.id,
            user_id=model.user_id,
            product_id=model.product_id,
            product=Product.from_model(model.product),
            created_at=model.created_at,
        )


@strawberry.type(description="Line snapshot captured when the order was placed")
class OrderItem:
    id: int
    order_id: int
    product_id: Optional[int]
    product_name: str
    product_price: float
    quantity: int
    total_price: float
    created_at: datetime

    @classmethod
    def from_model(cls, model: db.OrderItem) -> "OrderItem":
        return cls(
            id=model.id,
            order_id=model.order_id,
            product_id=model.product_id,
            product_name=model.product_name,
            product_price=model.product_price,
            quantity=model.quantity,
            total_price=model.total_price,
            created_at=model.created_at,
        )


@strawberry.type
class Order:
    id: int
    user_id: int
    order_number: str
    status: OrderStatus
    total_amount: float
    shipping_address: str
    shipping_city: str
    shipping_country: Optional[str]
    shipping_phone: str
    payment_method: PaymentMethod
    payment_status: PaymentStatus
    notes: Optional[str]
    created_at: datetime
    updated_at: datetime
    items: list[OrderItem]

    @classmethod
    def from_model(cls, model: db.Order) -> "Order":
        return cls(
            id=model.id,
            user_id=model.user_id,
            order_number=model.order_number,
            status=OrderStatus(model.status),
            total_amount=model.total_amount,
            shipping_address=model.shipping_address,
            shipping_city=model.shipping_city,
            shipping_country=model.shipping_country,
            shipping_phone=model.shipping_phone,
            payment_method=PaymentMethod(model.payment_method),
            payment_status=PaymentStatus(model.payment_status),
            notes=model.notes,
            created_at=model.created_at,
            updated_at=model.updated_at,
            items=[OrderItem.from_model(item) for item in model.items],
        )


@strawberry.type
class Review:
    id: int
    user_id: int
    user: ReviewAuthor
    product_id: int
    rating: int
    title: Optional[str]
    comment: str
    is_verified_purchase: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_model(cls, model: db.Review) -> "Review":
        return cls(
            id=model.id,
            user_id=model.user_id,
            user=ReviewAuthor(
                id=model.user.id,
                first_name=model.user.first_name,
                last_name=model.user.last_name,
            ),
            product_id=model.product_id,
            rating=model.rating,
            title=model.title,
            comment=model.comment,
            is_verified_purchase=model.is_verified_purchase,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
