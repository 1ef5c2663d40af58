"""Session token encoding.

Session tokens are issued at login by the accounts service and sent back
by the browser in the ``auth_token`` cookie. This API only needs to
verify them; ``create_token`` exists for tooling and tests, and signs
with the same shared secret.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from huddle.config import AuthSettings

# Tokens missing any of these are rejected outright
REQUIRED_CLAIMS = ["user_id", "exp"]


class SessionClaims(BaseModel):
    """Claims carried by a session token."""

    user_id: UUID
    exp: datetime


class JWTError(Exception):
    """Session token could not be accepted."""

    pass


def create_token(
    user_id: str, settings: AuthSettings, ttl: timedelta | None = None
) -> str:
    """Sign a session token for a user.

    Args:
        user_id: User ID
        settings: Authentication settings
        ttl: Token lifetime, defaults to ``jwt_expiry_days``

    Returns:
        Encoded JWT
    """
    issued_at = datetime.now(timezone.utc)
    if ttl is None:
        ttl = timedelta(days=settings.jwt_expiry_days)

    claims = {"user_id": user_id, "iat": issued_at, "exp": issued_at + ttl}
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str, settings: AuthSettings) -> SessionClaims:
    """Check a token's signature and expiry and return its claims.

    Raises:
        JWTError: If the token is expired, forged or malformed
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            leeway=settings.jwt_leeway_seconds,
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError(f"Invalid token: {e}") from e

    try:
        return SessionClaims.model_validate(claims)
    except PydanticValidationError as e:
        raise JWTError("Token does not carry a valid user id") from e
