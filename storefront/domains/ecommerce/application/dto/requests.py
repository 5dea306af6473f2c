"""
Request models

Typed, validated inputs for every mutating or parameterized operation. The API
layer builds these with ``Model.build(...)`` so malformed input is rejected as a
ValidationException before any business logic runs.
"""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, EmailStr, Field, ValidationError, field_validator, model_validator

from storefront.core.domain import ValidationException
from storefront.domains.ecommerce.domain.value_objects import PaymentMethod


class RequestModel(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="forbid", frozen=True)

    @classmethod
    def build(cls, **data: Any) -> Self:
        """
        Validate ``data`` into a request.

        Raises:
            ValidationException: With the first offending field and every
                error listed under ``details["errors"]``.
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            errors = []
            for error in e.errors():
                field = ".".join(str(loc) for loc in error["loc"]) or None
                message = error["msg"].removeprefix("Value error, ")
                errors.append({"field": field, "message": message})
            first = errors[0]
            message = first["message"] if first["field"] is None else f"{first['field']}: {first['message']}"
            raise ValidationException(message, field=first["field"], details={"errors": errors}) from e


class RegisterRequest(RequestModel):
    email: EmailStr
    password: str = Field(min_length=8, max_length=128)
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    phone: str | None = Field(None, max_length=30)
    address: str | None = Field(None, max_length=500)
    city: str | None = Field(None, max_length=100)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()


class LoginRequest(RequestModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UpdateProfileRequest(RequestModel):
    first_name: str | None = Field(None, min_length=1, max_length=100)
    last_name: str | None = Field(None, min_length=1, max_length=100)
    phone: str | None = Field(None, max_length=30)
    address: str | None = Field(None, max_length=500)
    city: str | None = Field(None, max_length=100)
    country: str | None = Field(None, max_length=100)


class ProductFilterRequest(RequestModel):
    category_id: int | None = None
    search: str | None = Field(None, max_length=200)
    min_price: float | None = Field(None, ge=0)
    max_price: float | None = Field(None, ge=0)
    is_featured: bool | None = None

    @model_validator(mode="after")
    def check_price_range(self) -> Self:
        if self.min_price is not None and self.max_price is not None and self.min_price > self.max_price:
            raise ValueError("min_price must not exceed max_price")
        return self


class PaginationRequest(RequestModel):
    """Page numbering starts at 1. Zero or missing values disable pagination."""

    page: int | None = Field(None, ge=0)
    limit: int | None = Field(None, ge=0)

    @property
    def is_paginated(self) -> bool:
        return bool(self.page) and bool(self.limit)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit if self.is_paginated else 0


class AddToCartRequest(RequestModel):
    product_id: int
    quantity: int = Field(1, ge=1)


class UpdateCartItemRequest(RequestModel):
    cart_item_id: int
    quantity: int = Field(ge=1)


class CreateOrderRequest(RequestModel):
    shipping_address: str = Field(min_length=1, max_length=500)
    shipping_city: str = Field(min_length=1, max_length=100)
    shipping_phone: str = Field(min_length=1, max_length=30)
    shipping_country: str | None = Field(None, max_length=100)
    payment_method: PaymentMethod = PaymentMethod.CASH_ON_DELIVERY
    notes: str | None = Field(None, max_length=2000)


class CreateReviewRequest(RequestModel):
    product_id: int
    rating: int
    title: str | None = Field(None, max_length=200)
    comment: str = Field(min_length=1, max_length=5000)

    @field_validator("rating")
    @classmethod
    def check_rating(cls, v: int) -> int:
        if not 1 <= v <= 5:
            raise ValueError("rating must be between 1 and 5")
        return v


class TranslateTextRequest(RequestModel):
    text: str = Field(min_length=1, max_length=5000)
    source_language: str = Field(min_length=1, max_length=50)
    target_language: str = Field(min_length=1, max_length=50)


class GenerateDescriptionRequest(RequestModel):
    product_id: int
    language: str = Field("Arabic", min_length=1, max_length=50)
