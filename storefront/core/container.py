"""
Dependency Container

Builds the shared collaborators once (store client, token service, password
hasher, LLM) and hands out use cases wired to them.
"""

import logging

from storefront.config.settings import Settings
from storefront.core.interfaces.llm import ILLM
from storefront.database import Database
from storefront.domains.ecommerce.application import use_cases
from storefront.domains.ecommerce.application.ports import IPasswordHasher, ITokenService
from storefront.integrations.llm import OpenAICompatibleLLM
from storefront.services import PasswordHasher, TokenService

logger = logging.getLogger(__name__)


class DependencyContainer:
    """
    Composition root.

    Collaborators can be injected for tests; anything omitted is created from
    settings.
    """

    def __init__(
        self,
        settings: Settings,
        database: Database | None = None,
        token_service: ITokenService | None = None,
        password_hasher: IPasswordHasher | None = None,
        llm: ILLM | None = None,
    ):
        self.settings = settings
        self.database = database or Database.from_settings(settings)
        self.token_service = token_service or TokenService.from_settings(settings)
        self.password_hasher = password_hasher or PasswordHasher(rounds=settings.BCRYPT_ROUNDS)
        self._llm = llm
        logger.info("DependencyContainer initialized")

    @property
    def llm(self) -> ILLM:
        if self._llm is None:
            self._llm = OpenAICompatibleLLM.from_settings(self.settings)
        return self._llm

    # Accounts
    def create_register_user_use_case(self) -> use_cases.RegisterUserUseCase:
        return use_cases.RegisterUserUseCase(self.database, self.password_hasher, self.token_service)

    def create_login_use_case(self) -> use_cases.LoginUseCase:
        return use_cases.LoginUseCase(self.database, self.password_hasher, self.token_service)

    def create_get_current_user_use_case(self) -> use_cases.GetCurrentUserUseCase:
        return use_cases.GetCurrentUserUseCase(self.database)

    def create_update_profile_use_case(self) -> use_cases.UpdateProfileUseCase:
        return use_cases.UpdateProfileUseCase(self.database)

    # Catalog
    def create_list_categories_use_case(self) -> use_cases.ListCategoriesUseCase:
        return use_cases.ListCategoriesUseCase(self.database)

    def create_get_category_use_case(self) -> use_cases.GetCategoryUseCase:
        return use_cases.GetCategoryUseCase(self.database)

    def create_list_products_use_case(self) -> use_cases.ListProductsUseCase:
        return use_cases.ListProductsUseCase(self.database)

    def create_get_product_use_case(self) -> use_cases.GetProductUseCase:
        return use_cases.GetProductUseCase(self.database)

    def create_get_featured_products_use_case(self) -> use_cases.GetFeaturedProductsUseCase:
        return use_cases.GetFeaturedProductsUseCase(self.database)

    def create_search_products_use_case(self) -> use_cases.SearchProductsUseCase:
        return use_cases.SearchProductsUseCase(self.database)

    # Cart
    def create_get_cart_use_case(self) -> use_cases.GetCartUseCase:
        return use_cases.GetCartUseCase(self.database)

    def create_add_to_cart_use_case(self) -> use_cases.AddToCartUseCase:
        return use_cases.AddToCartUseCase(self.database)

    def create_update_cart_item_use_case(self) -> use_cases.UpdateCartItemUseCase:
        return use_cases.UpdateCartItemUseCase(self.database)

    def create_remove_from_cart_use_case(self) -> use_cases.RemoveFromCartUseCase:
        return use_cases.RemoveFromCartUseCase(self.database)

    def create_clear_cart_use_case(self) -> use_cases.ClearCartUseCase:
        return use_cases.ClearCartUseCase(self.database)

    # Wishlist
    def create_get_wishlist_use_case(self) -> use_cases.GetWishlistUseCase:
        return use_cases.GetWishlistUseCase(self.database)

    def create_add_to_wishlist_use_case(self) -> use_cases.AddToWishlistUseCase:
        return use_cases.AddToWishlistUseCase(self.database)

    def create_remove_from_wishlist_use_case(self) -> use_cases.RemoveFromWishlistUseCase:
        return use_cases.RemoveFromWishlistUseCase(self.database)

    # Orders
    def create_create_order_use_case(self) -> use_cases.CreateOrderUseCase:
        return use_cases.CreateOrderUseCase(self.database, self.settings)

    def create_list_orders_use_case(self) -> use_cases.ListOrdersUseCase:
        return use_cases.ListOrdersUseCase(self.database)

    def create_get_order_use_case(self) -> use_cases.GetOrderUseCase:
        return use_cases.GetOrderUseCase(self.database)

    def create_update_order_status_use_case(self) -> use_cases.UpdateOrderStatusUseCase:
        return use_cases.UpdateOrderStatusUseCase(self.database, self.settings)

    # Reviews
    def create_create_review_use_case(self) -> use_cases.CreateReviewUseCase:
        return use_cases.CreateReviewUseCase(self.database)

    def create_list_product_reviews_use_case(self) -> use_cases.ListProductReviewsUseCase:
        return use_cases.ListProductReviewsUseCase(self.database)

    # Text generation
    def create_translate_text_use_case(self) -> use_cases.TranslateTextUseCase:
        return use_cases.TranslateTextUseCase(self.llm)

    def create_generate_product_description_use_case(self) -> use_cases.GenerateProductDescriptionUseCase:
        return use_cases.GenerateProductDescriptionUseCase(self.database, self.llm)
