"""JWT access tokens.

Tokens are issued elsewhere with the shared secret. create_access_token is
here for trusted tooling and tests.
"""

from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

from jose import JWTError, jwt

from src.taskboard.core.config import get_settings

TOKEN_TYPE_ACCESS = "access"


class InvalidTokenError(Exception):
    """Token is unusable as an access token. The message says why."""


def create_access_token(subject: str | UUID, expires_delta: timedelta | None = None) -> str:
    """Mint a signed access token whose subject is a user id."""
    settings = get_settings()
    lifetime = expires_delta
    if lifetime is None:
        lifetime = timedelta(minutes=settings.access_token_expire_minutes)
    claims = {
        "sub": str(subject),
        "type": TOKEN_TYPE_ACCESS,
        "exp": datetime.now(UTC) + lifetime,
    }
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)  # type: ignore[no-any-return]


def decode_token(token: str) -> dict[str, Any] | None:
    """Return the verified claims of token, or None if the signature or expiry fails."""
    settings = get_settings()
    try:
        claims: dict[str, Any] = jwt.decode(
            token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm]
        )
    except JWTError:
        return None
    return claims


def read_access_token(token: str) -> UUID:
    """Return the user id carried by a valid access token.

    Raises:
        InvalidTokenError: Bad signature, expired, wrong type or no usable subject.
    """
    claims = decode_token(token)
    if claims is None:
        raise InvalidTokenError("Invalid or expired token")
    if claims.get("type") != TOKEN_TYPE_ACCESS:
        raise InvalidTokenError("Invalid token type")
    subject = claims.get("sub")
    if not subject:
        raise InvalidTokenError("Invalid token payload")
    try:
        return UUID(subject)
    except ValueError as e:
        raise InvalidTokenError("Invalid user_id in token") from e
