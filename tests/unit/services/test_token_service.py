"""
Unit Tests for access tokens, password digests and bearer extraction
"""

from datetime import timedelta

import pytest

from storefront.api.middleware.auth import extract_bearer_token
from storefront.core.domain import Viewer
from storefront.services import PasswordHasher, TokenService


@pytest.mark.unit
class TestTokenService:
    def test_issued_token_resolves_to_same_identity(self):
        service = TokenService(secret_key="secret")

        token = service.issue(42, "layla@example.com")

        assert service.verify(token) == Viewer(id=42, email="layla@example.com")

    def test_expired_token_is_rejected(self):
        service = TokenService(secret_key="secret")
        token = service.issue(42, "layla@example.com", expires_delta=timedelta(seconds=-10))

        assert service.verify(token) is None

    def test_token_signed_with_other_secret_is_rejected(self):
        token = TokenService(secret_key="other").issue(42, "layla@example.com")

        assert TokenService(secret_key="secret").verify(token) is None

    def test_garbage_is_rejected(self):
        assert TokenService(secret_key="secret").verify("not.a.token") is None


@pytest.mark.unit
class TestPasswordHasher:
    def test_hash_and_verify(self):
        hasher = PasswordHasher(rounds=4)

        digest = hasher.hash("correct horse")

        assert digest != "correct horse"
        assert hasher.verify("correct horse", digest)
        assert not hasher.verify("wrong horse", digest)

    def test_malformed_digest_does_not_verify(self):
        assert not PasswordHasher(rounds=4).verify("anything", "not-a-bcrypt-digest")

    def test_missing_digest_never_verifies(self):
        hasher = PasswordHasher(rounds=4)
        assert not hasher.verify("correct horse", None)
        assert not hasher.verify("unused", None)

    def test_long_passwords_are_supported(self):
        hasher = PasswordHasher(rounds=4)
        password = "x" * 100
        assert hasher.verify(password, hasher.hash(password))


@pytest.mark.unit
@pytest.mark.parametrize(
    "header,expected",
    [
        ("Bearer abc.def", "abc.def"),
        ("bearer abc.def", "abc.def"),
        ("Basic abc", None),
        ("Bearer", None),
        ("", None),
        (None, None),
    ],
)
def test_extract_bearer_token(header, expected):
    assert extract_bearer_token(header) == expected
