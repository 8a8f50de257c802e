"""Access token validation."""

from src.taskboard.core.security.crypto import (
    TOKEN_TYPE_ACCESS,
    InvalidTokenError,
    create_access_token,
    decode_token,
    read_access_token,
)

__all__ = [
    "InvalidTokenError",
    "TOKEN_TYPE_ACCESS",
    "create_access_token",
    "decode_token",
    "read_access_token",
]
