"""Unit tests for session token handling."""

from datetime import timedelta
from uuid import uuid4

import jwt
import pytest

from huddle.config import AuthSettings
from huddle.domain.service import JWTService
from huddle.util.jwt import JWTError, create_token, decode_token

SETTINGS = AuthSettings(jwt_secret="test-secret")


class TestDecodeToken:
    """Signature, expiry and claim checks."""

    def test_valid_token(self):
        user_id = uuid4()

        claims = decode_token(create_token(str(user_id), SETTINGS), SETTINGS)

        assert claims.user_id == user_id

    def test_expired_token(self):
        token = create_token(str(uuid4()), SETTINGS, ttl=timedelta(minutes=-5))

        with pytest.raises(JWTError, match="expired"):
            decode_token(token, SETTINGS)

    def test_expiry_within_leeway_is_accepted(self):
        token = create_token(str(uuid4()), SETTINGS, ttl=timedelta(seconds=-5))

        assert decode_token(token, SETTINGS)

    def test_wrong_secret(self):
        token = create_token(str(uuid4()), AuthSettings(jwt_secret="other-secret"))

        with pytest.raises(JWTError):
            decode_token(token, SETTINGS)

    def test_missing_user_id(self):
        token = jwt.encode({"exp": 4102444800}, SETTINGS.jwt_secret, algorithm="HS256")

        with pytest.raises(JWTError):
            decode_token(token, SETTINGS)

    def test_user_id_must_be_uuid(self):
        token = create_token("alice", SETTINGS)

        with pytest.raises(JWTError, match="user id"):
            decode_token(token, SETTINGS)


class TestJWTService:
    """Requester resolution never raises."""

    def test_authenticate(self):
        service = JWTService(SETTINGS)
        user_id = uuid4()

        assert service.authenticate(create_token(str(user_id), SETTINGS)) == user_id

    @pytest.mark.parametrize("token", [None, "", "garbage"])
    def test_authenticate_rejects_quietly(self, token):
        assert JWTService(SETTINGS).authenticate(token) is None
