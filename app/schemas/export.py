"""Export API schemas."""

from pydantic import BaseModel, EmailStr, Field


class PlaylistExportRequest(BaseModel):
    """Request body for POST /export/playlists/{id}."""

    target_email: EmailStr = Field(...)


class ExportQueuedResponse(BaseModel):
    """Response for POST /export/playlists/{id}."""

    message: str = "Export request queued"
