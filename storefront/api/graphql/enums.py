"""
GraphQL enums backed by the domain value objects.
"""

import strawberry

from storefront.domains.ecommerce.domain.value_objects import OrderStatus, PaymentMethod, PaymentStatus

OrderStatus = strawberry.enum(OrderStatus, description="Order lifecycle state")
PaymentStatus = strawberry.enum(PaymentStatus, description="Payment state of an order")
PaymentMethod = strawberry.enum(PaymentMethod, description="Accepted payment methods")

__all__ = ["OrderStatus", "PaymentMethod", "PaymentStatus"]
