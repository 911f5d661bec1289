"""Note schemas for API requests and responses."""
from datetime import datetime

from pydantic import BaseModel, Field


class NoteCreate(BaseModel):
    """Schema for creating a note. Whitespace is trimmed by the service."""

    data: str = Field(..., description="Note body")


class NoteUpdate(BaseModel):
    """Schema for replacing a note's body."""

    data: str = Field(..., description="New note body (at least 2 characters)")


class NoteResponse(BaseModel):
    """Schema for note responses and webhook payloads."""

    id: int
    title: str
    data: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class SuccessResponse(BaseModel):
    """Boolean outcome of an update or delete."""

    success: bool
