"""Album and album like API schemas."""

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.song import SongListItem


class AlbumRequest(BaseModel):
    """Request body for POST /albums and PUT /albums/{id}."""

    name: str = Field(..., min_length=1, max_length=255)
    year: int = Field(..., ge=1000, le=9999)


class AlbumCoverRequest(BaseModel):
    """Request body for PUT /albums/{id}/cover. The file itself is stored upstream."""

    cover_url: str = Field(..., min_length=1, max_length=256)


class AlbumCreatedResponse(BaseModel):
    """Response for POST /albums."""

    album_id: str


class AlbumResponse(BaseModel):
    """Album with its songs."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    year: int
    cover_url: str | None = None
    songs: list[SongListItem] = Field(default_factory=list)


class AlbumLikesResponse(BaseModel):
    """Response for GET /albums/{id}/likes."""

    likes: int
