from .order_status import (
    ORDER_STATUS_TRANSITIONS,
    OrderStatus,
    PaymentMethod,
    PaymentStatus,
    validate_status_transition,
)

__all__ = [
    "ORDER_STATUS_TRANSITIONS",
    "OrderStatus",
    "PaymentMethod",
    "PaymentStatus",
    "validate_status_transition",
]
