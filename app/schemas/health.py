"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")


class ReadinessResponse(BaseModel):
    """Response for GET /health/ready."""

    status: str = Field(default="ok", description="Readiness status")
    database: str = Field(default="ok", description="Database reachability")
    cache: str = Field(
        default="ok",
        description="Cache status: ok, unavailable (reads fall back to the database) or disabled",
    )


class ReadinessErrorResponse(BaseModel):
    """Response for GET /health/ready when the database is unreachable (503)."""

    status: str = Field(default="not_ready", description="Readiness status")
    message: str = Field(..., description="Reason")
