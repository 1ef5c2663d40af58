"""Resolution of the requester behind a session cookie."""

import logfire

from huddle.config import AuthSettings
from huddle.domain.value import UserId
from huddle.util.jwt import JWTError, decode_token

from .base import Service


class JWTService(Service):
    """Maps session tokens to user ids."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def authenticate(self, token: str | None) -> UserId | None:
        """Return the user a session token belongs to.

        A missing or unverifiable token yields None instead of an error;
        operations that need a user reject the anonymous call themselves.
        """
        if not token:
            return None

        try:
            claims = decode_token(token, self.auth_settings)
        except JWTError as e:
            logfire.warn("Session token rejected", reason=str(e))
            return None

        return UserId(claims.user_id)
