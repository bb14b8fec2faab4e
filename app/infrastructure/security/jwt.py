"""JWT access tokens carrying the caller's user id in the sub claim.

The catalog does not issue credentials itself; it only needs a verified
caller identity for playlist, collaboration, like and export routes.
"""

from datetime import timedelta
from typing import Any, cast

from jose import JWTError, jwt

from app.core.config import get_settings
from app.domain.exceptions import AuthenticationException
from app.shared.utils.datetime import utc_now


def create_access_token(user_id: str, expires_delta: timedelta | None = None) -> str:
    """Create a signed token for user_id.

    Args:
        user_id: Value of the sub claim.
        expires_delta: Optional TTL; else uses settings.access_token_expire_minutes.
    """
    settings = get_settings()
    lifetime = expires_delta or timedelta(minutes=settings.access_token_expire_minutes)
    claims = {"sub": user_id, "exp": utc_now() + lifetime}
    encoded = jwt.encode(
        claims,
        settings.secret_key.get_secret_value(),
        algorithm=settings.algorithm,
    )
    return cast(str, encoded)


def decode_token(token: str) -> dict[str, Any]:
    """Verify signature and expiry and return the claims.

    Raises:
        AuthenticationException: Token invalid, expired, or missing sub/exp.
    """
    settings = get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise AuthenticationException(f"Invalid token: {e!s}") from e
    if not payload.get("sub"):
        raise AuthenticationException("Token missing required claim: sub")
    return payload


def get_user_id_from_token(token: str) -> str:
    """Return the caller's user id (sub claim) from a verified token."""
    return str(decode_token(token)["sub"])
