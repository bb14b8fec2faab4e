"""Request ID middleware.

Forwards a client-supplied request id (if safe to log) or generates one,
exposes it to logging through the request context var, and echoes it on the
response. Raw ASGI so streaming responses are untouched.
"""

import re
import uuid
from typing import Callable

from app.shared.context import reset_request_id, set_request_id

REQUEST_ID_MAX_LENGTH = 64
REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,%d}$" % REQUEST_ID_MAX_LENGTH)


def resolve_request_id(raw: str | None) -> str:
    """Return raw when it is a safe identifier, else a fresh UUID4 hex."""
    if raw:
        candidate = raw.strip()
        if REQUEST_ID_PATTERN.match(candidate):
            return candidate
    return uuid.uuid4().hex


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Bind a request id to each HTTP request for its whole lifetime."""
    header_key = header_name.lower().encode()

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        raw = next(
            (
                value.decode("latin-1")
                for name, value in scope.get("headers", [])
                if name.lower() == header_key
            ),
            None,
        )
        request_id = resolve_request_id(raw)
        scope.setdefault("state", {})["request_id"] = request_id

        async def send_with_header(message: dict) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [
                    *message.get("headers", []),
                    (header_key, request_id.encode()),
                ]
            await send(message)

        token = set_request_id(request_id)
        try:
            await app(scope, receive, send_with_header)
        finally:
            reset_request_id(token)

    return asgi_app
