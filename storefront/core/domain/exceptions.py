"""
Domain Exceptions

These exceptions represent business rule violations and domain-specific errors.
The GraphQL layer exposes them unmasked, with ``code`` published in the
``extensions`` of the error entry.
"""

from typing import Any


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    Provides a standardized way to communicate business rule violations.
    """

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "INSUFFICIENT_STOCK")
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}

    @property
    def extensions(self) -> dict[str, Any]:
        """Error extensions picked up by graphql-core when the error is located."""
        return {"code": self.code, **self.details}


class ValidationException(DomainException):
    """
    Raised when input validation fails.

    Use for out-of-range values, malformed input and invalid field combinations.
    """

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, "VALIDATION_ERROR", details)
        self.field = field


class EntityNotFoundException(DomainException):
    """
    Raised when an entity is not found.
    """

    def __init__(
        self,
        entity_type: str,
        entity_id: Any,
        message: str | None = None,
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        msg = message or f"{entity_type} with ID {entity_id} not found"
        super().__init__(
            msg,
            "NOT_FOUND",
            {"entity_type": entity_type, "entity_id": str(entity_id)},
        )


class DuplicateEntityException(DomainException):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: Any, message: str | None = None):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(
            message or f"{entity_type} with {field}='{value}' already exists",
            "CONFLICT",
            {
                "entity_type": entity_type,
                "field": field,
            },
        )


class InsufficientStockException(DomainException):
    """Raised when there's not enough stock for an operation."""

    def __init__(self, product_id: int, requested: int, available: int | None = None):
        self.product_id = product_id
        self.requested = requested
        self.available = available
        message = f"Insufficient stock for product {product_id}. Requested: {requested}"
        if available is not None:
            message += f", Available: {available}"
        super().__init__(
            message,
            "INSUFFICIENT_STOCK",
            {
                "product_id": product_id,
                "requested": requested,
                "available": available,
            },
        )


class EmptyCartException(DomainException):
    """Raised when an order is requested for an empty cart."""

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__("Cart is empty", "EMPTY_CART")


class InvalidOperationException(DomainException):
    """Raised when an operation is not valid in the current state."""

    def __init__(self, operation: str, current_state: str, message: str | None = None):
        self.operation = operation
        self.current_state = current_state
        msg = message or f"Cannot perform '{operation}' in state '{current_state}'"
        super().__init__(
            msg,
            "INVALID_OPERATION",
            {"operation": operation, "current_state": current_state},
        )


class UnauthenticatedException(DomainException):
    """Raised when an operation requires an identity and none was supplied."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, "UNAUTHENTICATED")


class InvalidCredentialsException(DomainException):
    """
    Raised when login fails.

    The message never reveals whether the email exists.
    """

    def __init__(self):
        super().__init__("Invalid email or password", "INVALID_CREDENTIALS")


class AuthorizationException(DomainException):
    """Raised when a user is not authorized to perform an operation."""

    def __init__(self, operation: str, resource: str | None = None, user_id: int | None = None):
        self.operation = operation
        self.resource = resource
        self.user_id = user_id
        msg = f"Not authorized to perform '{operation}'"
        if resource:
            msg += f" on '{resource}'"
        super().__init__(
            msg,
            "FORBIDDEN",
            {
                "operation": operation,
                "resource": resource,
            },
        )


class IntegrationException(DomainException):
    """Raised when an external collaborator (store, text generation) fails."""

    def __init__(self, service: str, message: str, original_error: Exception | None = None):
        self.service = service
        self.original_error = original_error
        super().__init__(message, "UPSTREAM_FAILURE", {"service": service})
