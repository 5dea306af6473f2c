"""
Order Status Value Objects

Lifecycle states of an order and the payment placeholders attached to it.
"""

from storefront.core.domain import InvalidOperationException, StatusEnum


class OrderStatus(StatusEnum):
    """
    Order lifecycle states.

    Valid transitions:
    - PENDING -> PROCESSING, CANCELLED
    - PROCESSING -> SHIPPED, CANCELLED
    - SHIPPED -> DELIVERED
    - DELIVERED, CANCELLED -> (terminal states)
    """

    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    def can_transition_to(self, new_status: "OrderStatus") -> bool:
        """Check if transition to new status is allowed by the transition table."""
        return new_status in ORDER_STATUS_TRANSITIONS[self]


ORDER_STATUS_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.PROCESSING, OrderStatus.CANCELLED}),
    OrderStatus.PROCESSING: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


def validate_status_transition(current: OrderStatus, new_status: OrderStatus, strict: bool) -> None:
    """
    Validate a status change.

    Re-applying the current status is always accepted. Without ``strict`` any
    known status may follow any other.

    Raises:
        InvalidOperationException: In strict mode, when the table forbids the change.
    """
    if current == new_status or not strict:
        return
    if not current.can_transition_to(new_status):
        raise InvalidOperationException(
            operation=f"transition to {new_status.value}",
            current_state=current.value,
        )


class PaymentStatus(StatusEnum):
    """Payment status for orders."""

    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"


class PaymentMethod(StatusEnum):
    """Supported payment methods. Cash on delivery is the only one, with no gateway."""

    CASH_ON_DELIVERY = "cash_on_delivery"
