"""
Authentication context middleware.

Resolves the bearer token of each request into a ``Viewer`` stored on
``request.state.viewer``. Requests are never rejected here: anonymous and
invalid-token requests proceed with ``viewer = None`` and each GraphQL
operation decides whether it needs an identity.
"""

import logging
from collections.abc import Callable
from typing import Any

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp

from storefront.domains.ecommerce.application.ports import ITokenService

logger = logging.getLogger(__name__)


def extract_bearer_token(authorization: str | None) -> str | None:
    """
    Extract the token from an ``Authorization: Bearer <token>`` header value.

    Returns:
        Token string if the header uses the Bearer scheme, None otherwise.
    """
    if not authorization:
        return None

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1]


class AuthContextMiddleware(BaseHTTPMiddleware):
    """Attach the calling identity (if any) to the request state."""

    def __init__(self, app: ASGIApp, token_service: ITokenService) -> None:
        super().__init__(app)
        self._token_service = token_service

    async def dispatch(self, request: Request, call_next: Callable[[Request], Any]) -> Response:
        request.state.viewer = None

        token = extract_bearer_token(request.headers.get("Authorization"))
        if token:
            viewer = self._token_service.verify(token)
            if viewer is None:
                logger.info(f"Ignoring invalid bearer token for {request.url.path}")
            request.state.viewer = viewer

        return await call_next(request)
