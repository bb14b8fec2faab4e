"""Request context management using contextvars.

Holds request-scoped values (request id) that logging reads without
threading them through every call. Scoped to the current async task.
"""

from contextvars import ContextVar, Token

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)


def set_request_id(request_id: str | None) -> Token[str | None]:
    """Set the request id for the current task; returns a token for reset."""
    return _request_id.set(request_id)


def reset_request_id(token: Token[str | None]) -> None:
    """Restore the request id that was active before set_request_id."""
    _request_id.reset(token)


def get_request_id() -> str | None:
    """Return the current request id, or None outside a request."""
    return _request_id.get()
