"""Song API schemas."""

from pydantic import BaseModel, ConfigDict, Field


class SongRequest(BaseModel):
    """Request body for POST /songs and PUT /songs/{id}."""

    title: str = Field(..., min_length=1, max_length=255)
    year: int = Field(..., ge=1000, le=9999)
    genre: str = Field(..., min_length=1, max_length=100)
    performer: str = Field(..., min_length=1, max_length=255)
    duration: int | None = Field(default=None, ge=0)
    album_id: str | None = Field(default=None, max_length=64)


class SongCreatedResponse(BaseModel):
    """Response for POST /songs."""

    song_id: str


class SongListItem(BaseModel):
    """Song as it appears in listings."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    performer: str


class SongResponse(BaseModel):
    """Full song."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    year: int
    genre: str
    performer: str
    duration: int | None
    album_id: str | None
