"""Exception handlers: catalog errors and framework errors to JSON responses.

Every error body has ``error`` and ``message`` and, inside a request, the
``request_id`` that the RequestIDMiddleware echoes in the response header.
Register once with register_exception_handlers(app).
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.domain.exceptions import CatalogException
from app.shared.context import get_request_id

logger = logging.getLogger(__name__)

# error_code -> HTTP status; codes not listed are client errors (400).
_ERROR_CODE_STATUS: dict[str, int] = {
    "RESOURCE_NOT_FOUND": 404,
    "INVARIANT_ERROR": 400,
    "AUTHENTICATION_ERROR": 401,
    "AUTHORIZATION_ERROR": 403,
    "CACHE_INVALIDATION_FAILED": 500,
    "CACHE_UNAVAILABLE": 503,
    "QUEUE_PUBLISH_ERROR": 503,
}


def status_for(error_code: str) -> int:
    """HTTP status for a CatalogException error_code."""
    return _ERROR_CODE_STATUS.get(error_code, 400)


def _error_response(
    status_code: int,
    body: dict[str, Any],
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    request_id = get_request_id()
    if request_id:
        body = {**body, "request_id": request_id}
    return JSONResponse(status_code=status_code, content=body, headers=headers)


def _catalog_exception_handler(request: Request, exc: CatalogException) -> JSONResponse:
    status = status_for(exc.error_code)
    if status >= 500:
        logger.error(
            "%s on %s %s: %s", exc.error_code, request.method, request.url.path, exc.details
        )
    headers = {"WWW-Authenticate": "Bearer"} if status == 401 else None
    return _error_response(status, exc.to_dict(), headers)


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return _error_response(
        422,
        {
            "error": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": exc.errors(),
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Unknown routes, wrong methods and other framework-raised HTTP errors."""
    return _error_response(
        exc.status_code,
        {"error": "HTTP_ERROR", "message": exc.detail},
        getattr(exc, "headers", None),
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """500; the exception text is exposed only in debug mode."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    message: Any = str(exc) if get_settings().debug else "Internal server error"
    return _error_response(500, {"error": "INTERNAL_ERROR", "message": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all handlers to app. Call once from create_app()."""
    app.add_exception_handler(CatalogException, _catalog_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
