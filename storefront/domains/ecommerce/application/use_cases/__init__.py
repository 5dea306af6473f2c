"""
E-commerce Use Cases

Each use case opens its own unit of work through the injected ``Database`` and
takes the caller identity as an explicit argument where one is required.
"""

from .account_use_cases import GetCurrentUserUseCase, LoginUseCase, RegisterUserUseCase, UpdateProfileUseCase
from .cart_use_cases import (
    AddToCartUseCase,
    ClearCartUseCase,
    GetCartUseCase,
    RemoveFromCartUseCase,
    UpdateCartItemUseCase,
)
from .catalog_use_cases import (
    GetCategoryUseCase,
    GetFeaturedProductsUseCase,
    GetProductUseCase,
    ListCategoriesUseCase,
    ListProductsUseCase,
    SearchProductsUseCase,
)
from .create_order import CreateOrderUseCase
from .order_use_cases import GetOrderUseCase, ListOrdersUseCase, UpdateOrderStatusUseCase
from .review_use_cases import CreateReviewUseCase, ListProductReviewsUseCase
from .text_generation_use_cases import GenerateProductDescriptionUseCase, TranslateTextUseCase
from .wishlist_use_cases import AddToWishlistUseCase, GetWishlistUseCase, RemoveFromWishlistUseCase

__all__ = [
    "AddToCartUseCase",
    "AddToWishlistUseCase",
    "ClearCartUseCase",
    "CreateOrderUseCase",
    "CreateReviewUseCase",
    "GenerateProductDescriptionUseCase",
    "GetCartUseCase",
    "GetCategoryUseCase",
    "GetCurrentUserUseCase",
    "GetFeaturedProductsUseCase",
    "GetOrderUseCase",
    "GetProductUseCase",
    "GetWishlistUseCase",
    "ListCategoriesUseCase",
    "ListOrdersUseCase",
    "ListProductReviewsUseCase",
    "ListProductsUseCase",
    "LoginUseCase",
    "RegisterUserUseCase",
    "RemoveFromCartUseCase",
    "RemoveFromWishlistUseCase",
    "SearchProductsUseCase",
    "TranslateTextUseCase",
    "UpdateCartItemUseCase",
    "UpdateOrderStatusUseCase",
    "UpdateProfileUseCase",
]
