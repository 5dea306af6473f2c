from .requests import (
    AddToCartRequest,
    CreateOrderRequest,
    CreateReviewRequest,
    GenerateDescriptionRequest,
    LoginRequest,
    PaginationRequest,
    ProductFilterRequest,
    RegisterRequest,
    RequestModel,
    TranslateTextRequest,
    UpdateCartItemRequest,
    UpdateProfileRequest,
)
from .results import AuthResult, CartSummary, ProductPage, SearchResult

__all__ = [
    "AddToCartRequest",
    "AuthResult",
    "CartSummary",
    "CreateOrderRequest",
    "CreateReviewRequest",
    "GenerateDescriptionRequest",
    "LoginRequest",
    "PaginationRequest",
    "ProductFilterRequest",
    "ProductPage",
    "RegisterRequest",
    "RequestModel",
    "SearchResult",
    "TranslateTextRequest",
    "UpdateCartItemRequest",
    "UpdateProfileRequest",
]
