"""Shared utilities: datetime and id generators."""

from app.shared.utils.datetime import to_iso, utc_now
from app.shared.utils.generators import generate_cuid, generate_id

__all__ = [
    "generate_cuid",
    "generate_id",
    "to_iso",
    "utc_now",
]
