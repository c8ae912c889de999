"""
Unit tests for fieldvue.core.security
"""
import time

import jwt
import pytest

from fieldvue.core.security import (
    TokenClaims,
    hash_password,
    verify_password,
    create_access_token,
    decode_access_token,
)
from fieldvue.domain.constants.enums import UserRole
from fieldvue.domain.models.user import User


def _user(user_id="user-123", role=UserRole.CONTRACTOR):
    return User(
        id=user_id,
        name="Pat Painter",
        email="pat@example.com",
        hashed_password="hashed",
        role=role,
    )


def _encode(claims, secret="test_jwt_secret"):
    return jwt.encode(claims, secret, algorithm="HS256")


class TestPasswordHashing:
    def test_hash_is_salted(self):
        first = hash_password("same-password")
        second = hash_password("same-password")
        assert first != second
        assert first != "same-password"

    def test_verify(self):
        hashed = hash_password("correct horse")
        assert verify_password("correct horse", hashed) is True
        assert verify_password("wrong horse", hashed) is False

    def test_malformed_hash_is_false(self):
        assert verify_password("anything", "not-a-bcrypt-hash") is False


class TestAccessToken:
    def test_round_trip(self, mock_settings):
        token = create_access_token(_user())
        claims = decode_access_token(token)
        assert claims == TokenClaims(user_id="user-123", email="pat@example.com", role=UserRole.CONTRACTOR)

    def test_expiry_window(self, mock_settings):
        raw = jwt.decode(create_access_token(_user()), options={"verify_signature": False})
        assert raw["exp"] - raw["iat"] == 1440 * 60

    def test_unsaved_user_rejected(self, mock_settings):
        with pytest.raises(ValueError):
            create_access_token(_user(user_id=None))

    def test_invalid_token_raises_value_error(self, mock_settings):
        with pytest.raises(ValueError) as exc_info:
            decode_access_token("invalid.jwt.token")
        assert "Invalid token" in str(exc_info.value)

    def test_wrong_secret_rejected(self, mock_settings):
        token = _encode({"sub": "user-1"}, secret="some-other-secret")
        with pytest.raises(ValueError):
            decode_access_token(token)

    def test_expired_token_rejected(self, mock_settings):
        mock_settings.access_token_expire_minutes = -1
        token = create_access_token(_user())
        with pytest.raises(ValueError):
            decode_access_token(token)

    @pytest.mark.parametrize("missing", ["sub", "email", "role", "iat", "exp"])
    def test_missing_claim_rejected(self, mock_settings, missing):
        now = int(time.time())
        claims = {"sub": "user-1", "email": "a@example.com", "role": "customer", "iat": now, "exp": now + 60}
        del claims[missing]
        with pytest.raises(ValueError, match="Invalid token"):
            decode_access_token(_encode(claims))

    def test_unknown_role_rejected(self, mock_settings):
        now = int(time.time())
        token = _encode({"sub": "user-1", "email": "a@example.com", "role": "superuser", "iat": now, "exp": now + 60})
        with pytest.raises(ValueError, match="unknown role"):
            decode_access_token(token)
