"""
Middleware package for the FastAPI application.
"""

from storefront.api.middleware.auth import AuthContextMiddleware
from storefront.api.middleware.logging_middleware import RequestLoggingMiddleware

__all__ = [
    "AuthContextMiddleware",
    "RequestLoggingMiddleware",
]
