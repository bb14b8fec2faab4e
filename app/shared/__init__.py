"""Shared utilities: request context, logging setup, and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.context import get_request_id, reset_request_id, set_request_id
from app.shared.utils import generate_cuid, generate_id, to_iso, utc_now

__all__ = [
    "generate_cuid",
    "generate_id",
    "get_request_id",
    "reset_request_id",
    "set_request_id",
    "to_iso",
    "utc_now",
]
