"""
Application ports

Protocols for the collaborators the use cases depend on. Implementations live in
``storefront.services`` and ``storefront.integrations``.
"""

from typing import Protocol

from storefront.core.domain import Viewer
from storefront.core.interfaces.llm import ILLM


class IPasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...

    def verify(self, password: str, digest: str | None) -> bool: ...


class ITokenService(Protocol):
    def issue(self, user_id: int, email: str) -> str: ...

    def verify(self, token: str) -> Viewer | None: ...


__all__ = ["ILLM", "IPasswordHasher", "ITokenService"]
