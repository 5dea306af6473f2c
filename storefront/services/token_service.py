from datetime import UTC, datetime, timedelta
import logging
from typing import Any, Dict

import bcrypt
from jose import JWTError, jwt

from storefront.config.settings import Settings
from storefront.core.domain import Viewer

logger = logging.getLogger(__name__)

# bcrypt only considers the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


class PasswordHasher:
    """bcrypt password digests"""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds
        self._dummy_digest: bytes | None = None

    def hash(self, password: str) -> str:
        """Generate a salted digest for the password"""
        password_bytes = password.encode("utf-8")[:BCRYPT_MAX_BYTES]
        hash_bytes = bcrypt.hashpw(password_bytes, bcrypt.gensalt(rounds=self.rounds))
        return hash_bytes.decode("utf-8")

    def verify(self, password: str, digest: str | None) -> bool:
        """
        Check whether the password matches the digest.

        A missing digest (unknown account) is checked against a throwaway
        digest of the same cost and always fails, so both paths take as long.
        """
        password_bytes = password.encode("utf-8")[:BCRYPT_MAX_BYTES]
        if digest is None:
            if self._dummy_digest is None:
                self._dummy_digest = bcrypt.hashpw(b"unused", bcrypt.gensalt(rounds=self.rounds))
            bcrypt.checkpw(password_bytes, self._dummy_digest)
            return False
        try:
            return bcrypt.checkpw(password_bytes, digest.encode("utf-8"))
        except ValueError:
            logger.warning("Stored password digest is malformed")
            return False


class TokenService:
    """
    JWT access tokens.

    Tokens carry the user id in ``sub`` and the email in ``email``.
    """

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 60 * 24):
        self.SECRET_KEY = secret_key
        self.ALGORITHM = algorithm
        self.ACCESS_TOKEN_EXPIRE_MINUTES = expire_minutes

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret_key=settings.JWT_SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
            expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
        )

    def issue(self, user_id: int, email: str, expires_delta: timedelta | None = None) -> str:
        """
        Create an access token

        Args:
            user_id: Subject of the token
            email: Email claim
            expires_delta: Lifetime, ACCESS_TOKEN_EXPIRE_MINUTES when omitted

        Returns:
            Encoded JWT
        """
        now = datetime.now(UTC)
        expire = now + (expires_delta or timedelta(minutes=self.ACCESS_TOKEN_EXPIRE_MINUTES))
        to_encode: Dict[str, Any] = {
            "sub": str(user_id),
            "email": email,
            "iat": now,
            "exp": expire,
            "type": "access",
        }
        return jwt.encode(to_encode, self.SECRET_KEY, algorithm=self.ALGORITHM)

    def verify(self, token: str) -> Viewer | None:
        """
        Decode an access token.

        Returns:
            The identity carried by the token, or None when the token is
            invalid, expired or malformed.
        """
        try:
            payload = jwt.decode(token, self.SECRET_KEY, algorithms=[self.ALGORITHM])
        except JWTError as e:
            logger.debug(f"Rejected access token: {e}")
            return None

        if payload.get("type") != "access":
            return None
        try:
            return Viewer(id=int(payload["sub"]), email=str(payload["email"]))
        except (KeyError, TypeError, ValueError):
            logger.debug("Access token is missing identity claims")
            return None
