"""Security: JWT access tokens."""

from app.infrastructure.security.jwt import (
    create_access_token,
    decode_token,
    get_user_id_from_token,
)

__all__ = [
    "create_access_token",
    "decode_token",
    "get_user_id_from_token",
]
