"""Shared API schemas."""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Plain acknowledgement for writes that return no resource."""

    message: str
