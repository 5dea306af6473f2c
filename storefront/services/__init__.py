"""
Application services: access tokens and password digests.
"""

from storefront.services.token_service import PasswordHasher, TokenService

__all__ = ["PasswordHasher", "TokenService"]
