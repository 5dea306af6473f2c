"""
Error masking.

Domain errors reach the client with their message and ``extensions.code``.
Anything else is replaced by a generic message so internals never leak.
"""

import logging

from graphql import GraphQLError

from storefront.core.domain import DomainException

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "Unexpected error."


def should_mask_error(error: GraphQLError) -> bool:
    original = error.original_error
    if original is None or isinstance(original, DomainException):
        return False
    logger.error(f"Unhandled error in GraphQL operation at {error.path}: {original!r}")
    return True
