"""
GraphQL input types.

Inputs are converted to the validated request models of the application
layer with ``to_request``; validation lives there, not here.
"""

from typing import Optional

import strawberry

from storefront.api.graphql.enums import PaymentMethod
from storefront.domains.ecommerce.application import dto


def _provided(value: object) -> dict:
    """Keyword arguments for every input field that was not left UNSET."""
    return {key: val for key, val in vars(value).items() if val is not strawberry.UNSET}


@strawberry.input
class RegisterInput:
    email: str
    password: str
    first_name: str
    last_name: str
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None

    def to_request(self) -> dto.RegisterRequest:
        return dto.RegisterRequest.build(**_provided(self))


@strawberry.input
class LoginInput:
    email: str
    password: str

    def to_request(self) -> dto.LoginRequest:
        return dto.LoginRequest.build(email=self.email, password=self.password)


@strawberry.input
class UpdateProfileInput:
    first_name: Optional[str] = strawberry.UNSET
    last_name: Optional[str] = strawberry.UNSET
    phone: Optional[str] = strawberry.UNSET
    address: Optional[str] = strawberry.UNSET
    city: Optional[str] = strawberry.UNSET
    country: Optional[str] = strawberry.UNSET

    def to_request(self) -> dto.UpdateProfileRequest:
        return dto.UpdateProfileRequest.build(**_provided(self))


@strawberry.input
class ProductFilterInput:
    category_id: Optional[int] = None
    search: Optional[str] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    is_featured: Optional[bool] = None

    def to_request(self) -> dto.ProductFilterRequest:
        return dto.ProductFilterRequest.build(**_provided(self))


@strawberry.input(description="Pagination applies only when both page and limit are positive")
class PaginationInput:
    page: Optional[int] = None
    limit: Optional[int] = None

    def to_request(self) -> dto.PaginationRequest:
        return dto.PaginationRequest.build(**_provided(self))


@strawberry.input
class AddToCartInput:
    product_id: int
    quantity: int = 1

    def to_request(self) -> dto.AddToCartRequest:
        return dto.AddToCartRequest.build(product_id=self.product_id, quantity=self.quantity)


@strawberry.input
class CreateOrderInput:
    shipping_address: str
    shipping_city: str
    shipping_phone: str
    shipping_country: Optional[str] = None
    payment_method: PaymentMethod = PaymentMethod.CASH_ON_DELIVERY
    notes: Optional[str] = None

    def to_request(self) -> dto.CreateOrderRequest:
        return dto.CreateOrderRequest.build(**_provided(self))


@strawberry.input
class CreateReviewInput:
    product_id: int
    rating: int
    comment: str
    title: Optional[str] = None

    def to_request(self) -> dto.CreateReviewRequest:
        return dto.CreateReviewRequest.build(**_provided(self))
