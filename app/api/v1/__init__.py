"""API v1: routers, endpoints and dependency wiring."""

from app.api.v1.router import api_router

__all__ = ["api_router"]
