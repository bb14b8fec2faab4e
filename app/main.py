"""Catalog API entry point.

create_app() wires the lifespan (database, cache store, export producer),
the exception handlers, request id middleware and the v1 routers. Settings
resolve inside create_app() so tests can set env before the first call.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1 import api_router
from app.core.config import get_settings
from app.core.exception_handlers import register_exception_handlers
from app.core.lifespan import create_lifespan
from app.middleware import RequestIDMiddleware


def create_app() -> FastAPI:
    """Build the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    register_exception_handlers(app)

    # First added = innermost. Browsers may read the provenance and request id headers.
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[settings.request_id_header, settings.data_source_header],
    )

    app.include_router(api_router, prefix="/api/v1")
    return app


app = create_app()
