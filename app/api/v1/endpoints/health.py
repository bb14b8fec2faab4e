"""Health check endpoints: liveness without dependencies, readiness against the database."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.dependencies import get_cache, get_db
from app.infrastructure.cache.cache_protocol import CacheProtocol
from app.schemas.health import (
    HealthResponse,
    ReadinessErrorResponse,
    ReadinessResponse,
)

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return simple ok status for liveness."""
    return HealthResponse()


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"description": "Database unreachable", "model": ReadinessErrorResponse}},
)
async def readiness_check(
    db: Annotated[AsyncSession, Depends(get_db)],
    cache: Annotated[CacheProtocol | None, Depends(get_cache)],
) -> ReadinessResponse | JSONResponse:
    """Return 200 when the database answers; 503 otherwise.

    An unavailable cache does not fail readiness since reads fall back to the
    database; it is reported in the body.
    """
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        return JSONResponse(
            status_code=503,
            content=ReadinessErrorResponse(message=f"Database unreachable: {e}").model_dump(),
        )
    if cache is None:
        cache_status = "disabled"
    elif cache.is_available():
        cache_status = "ok"
    else:
        cache_status = "unavailable"
    return ReadinessResponse(cache=cache_status)
