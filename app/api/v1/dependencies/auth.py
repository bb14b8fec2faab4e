"""Caller identity from the bearer token (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.domain.exceptions import AuthenticationException
from app.infrastructure.security.jwt import get_user_id_from_token

_http_bearer = HTTPBearer(auto_error=False)


async def get_current_user_id(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
) -> str:
    """Return the caller's user id (JWT sub); 401 if missing or invalid."""
    if credentials is None:
        raise AuthenticationException("Not authenticated")
    return get_user_id_from_token(credentials.credentials)
