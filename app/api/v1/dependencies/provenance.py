"""Response provenance: report cache hits to the client."""

from fastapi import Response

from app.application.dtos.cache import CachedResult
from app.core.config import get_settings
from app.core.constants import DATA_SOURCE_CACHE


def mark_data_source[T](response: Response, result: CachedResult[T]) -> T:
    """Set the data-source header on cache hits and return the plain value."""
    if result.from_cache:
        response.headers[get_settings().data_source_header] = DATA_SOURCE_CACHE
    return result.value
