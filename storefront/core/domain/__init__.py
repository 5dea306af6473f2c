"""
Core Domain

Exceptions and value object bases shared by every bounded context.
"""

from storefront.core.domain.exceptions import (
    AuthorizationException,
    DomainException,
    DuplicateEntityException,
    EmptyCartException,
    EntityNotFoundException,
    InsufficientStockException,
    IntegrationException,
    InvalidCredentialsException,
    InvalidOperationException,
    UnauthenticatedException,
    ValidationException,
)
from storefront.core.domain.identity import Viewer, require_viewer
from storefront.core.domain.value_objects import StatusEnum

__all__ = [
    "AuthorizationException",
    "DomainException",
    "DuplicateEntityException",
    "EmptyCartException",
    "EntityNotFoundException",
    "InsufficientStockException",
    "IntegrationException",
    "InvalidCredentialsException",
    "InvalidOperationException",
    "StatusEnum",
    "UnauthenticatedException",
    "ValidationException",
    "Viewer",
    "require_viewer",
]
