"""
Catalog Use Cases

Read-only queries over categories and active products.
"""

import logging

from storefront.core.domain import EntityNotFoundException
from storefront.database import Database
from storefront.domains.ecommerce.application.dto import (
    PaginationRequest,
    ProductFilterRequest,
    ProductPage,
    SearchResult,
)
from storefront.domains.ecommerce.infrastructure.repositories import (
    SQLAlchemyCategoryRepository,
    SQLAlchemyProductRepository,
)
from storefront.models.db import Category, Product

logger = logging.getLogger(__name__)


class ListCategoriesUseCase:
    def __init__(self, database: Database):
        self.database = database

    async def execute(self) -> list[Category]:
        async with self.database.session() as session:
            return await SQLAlchemyCategoryRepository(session).list_all()


class GetCategoryUseCase:
    def __init__(self, database: Database):
        self.database = database

    async def execute(self, category_id: int) -> Category:
        async with self.database.session() as session:
            category = await SQLAlchemyCategoryRepository(session).get_by_id(category_id)
        if category is None:
            raise EntityNotFoundException("Category", category_id)
        return category


class ListProductsUseCase:
    """
    Use Case: List Products

    Filters combine with AND and results are newest first. Pagination applies
    only when both page and limit are positive; otherwise the full result set
    is returned. ``has_more`` is computed by fetching one extra row.
    """

    def __init__(self, database: Database):
        self.database = database

    async def execute(
        self,
        filters: ProductFilterRequest | None = None,
        pagination: PaginationRequest | None = None,
    ) -> ProductPage:
        filters = filters or ProductFilterRequest()
        pagination = pagination or PaginationRequest()

        async with self.database.session() as session:
            products = SQLAlchemyProductRepository(session)
            if not pagination.is_paginated:
                items = await products.find(**filters.model_dump())
                return ProductPage(items=items, has_more=False)

            rows = await products.find(
                **filters.model_dump(),
                limit=pagination.limit + 1,
                offset=pagination.offset,
            )

        has_more = len(rows) > pagination.limit
        logger.debug(f"Listed {len(rows)} products (page={pagination.page}, limit={pagination.limit})")
        return ProductPage(
            items=rows[: pagination.limit],
            has_more=has_more,
            page=pagination.page,
            limit=pagination.limit,
        )


class GetProductUseCase:
    def __init__(self, database: Database):
        self.database = database

    async def execute(self, product_id: int) -> Product:
        """
        Raises:
            EntityNotFoundException: If the product is missing or inactive.
        """
        async with self.database.session() as session:
            product = await SQLAlchemyProductRepository(session).get_active(product_id)
        if product is None:
            raise EntityNotFoundException("Product", product_id)
        return product


class GetFeaturedProductsUseCase:
    def __init__(self, database: Database):
        self.database = database

    async def execute(self) -> list[Product]:
        async with self.database.session() as session:
            return await SQLAlchemyProductRepository(session).find(is_featured=True)


class SearchProductsUseCase:
    """Unpaginated text search over name and description."""

    def __init__(self, database: Database):
        self.database = database

    async def execute(self, query: str) -> SearchResult:
        filters = ProductFilterRequest.build(search=query)
        async with self.database.session() as session:
            products = await SQLAlchemyProductRepository(session).find(search=filters.search)
        return SearchResult(query=query, products=products)
