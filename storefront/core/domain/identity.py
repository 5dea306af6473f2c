"""
Caller identity.

Resolved from the bearer token by the API layer and passed explicitly to every
use case that needs to know who is calling.
"""

from dataclasses import dataclass

from storefront.core.domain.exceptions import UnauthenticatedException


@dataclass(frozen=True)
class Viewer:
    """Authenticated caller as carried by the access token."""

    id: int
    email: str


def require_viewer(viewer: Viewer | None) -> Viewer:
    """
    Return the viewer or fail for anonymous callers.

    Raises:
        UnauthenticatedException: If no identity was resolved for the request.
    """
    if viewer is None:
        raise UnauthenticatedException()
    return viewer
