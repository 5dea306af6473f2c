"""
Result objects returned by use cases.
"""

from dataclasses import dataclass, field

from storefront.models.db import CartItem, Product, User


@dataclass
class AuthResult:
    token: str
    user: User


@dataclass
class ProductPage:
    items: list[Product]
    has_more: bool
    page: int | None = None
    limit: int | None = None


@dataclass
class SearchResult:
    query: str
    products: list[Product] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.products)


@dataclass
class CartSummary:
    items: list[CartItem]

    @property
    def total_items(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def total_price(self) -> float:
        return round(sum(item.line_total for item in self.items), 2)
