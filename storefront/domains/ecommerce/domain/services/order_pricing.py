"""
Order pricing and numbering.

Pure functions used by the order creation use case.
"""

import secrets
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Iterable


@dataclass(frozen=True)
class PricedLine:
    """A cart line priced with the product price current at checkout."""

    product_id: int
    product_name: str
    unit_price: float
    quantity: int

    @property
    def total(self) -> float:
        return round(self.unit_price * self.quantity, 2)


def order_total(lines: Iterable[PricedLine]) -> float:
    """Sum of line totals, rounded to cents."""
    return round(sum(line.total for line in lines), 2)


def generate_order_number(now: datetime | None = None) -> str:
    """
    Human-readable order number, e.g. ``ORD-2026-9F2C61A0B7D4``.

    The random suffix carries 48 bits, so numbers generated in the same
    second do not collide in practice; the unique column is the backstop.
    """
    year = (now or datetime.now(UTC)).year
    return f"ORD-{year}-{secrets.token_hex(6).upper()}"
