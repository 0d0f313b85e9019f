"""
Notes Service - Pydantic Schemas
================================

What:  The Note model (the only persisted entity) plus the small response
       envelopes of the JSON API.
How:   FastAPI serializes these with `by_alias=True`, so the wire format and
       the on-disk format share the same field names: id, text, createdAt.

Note lifecycle:
    Created only by NoteService.create_note() (id and timestamp assigned at
    that moment), never modified, removed only by NoteService.delete_note().
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

# What: Upper bound on note text, counted after trimming surrounding whitespace
MAX_TEXT_LENGTH = 500


class Note(BaseModel):
    """
    A single stored note.

    `frozen` makes instances immutable; a note is replaced by deleting it,
    never edited in place.
    """

    id: str = Field(min_length=1, description="Unique note identifier")
    text: str = Field(
        min_length=1,
        max_length=MAX_TEXT_LENGTH,
        description="Trimmed note text (1-500 characters)",
    )
    created_at: datetime = Field(
        alias="createdAt",
        description="When the note was created (UTC ISO 8601)",
    )

    model_config = {"populate_by_name": True, "frozen": True}


class DeletedResponse(BaseModel):
    """Returned by DELETE /notes/{id} on success."""

    deleted: str = Field(description="Id of the note that was removed")


class ErrorResponse(BaseModel):
    """
    Error payload shared by every JSON error response.

    Example:
        {"error": "Note text must not be empty."}
    """

    error: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Liveness payload for GET /health; always `ok` while the process is up."""

    status: str = Field(default="ok", description="Fixed liveness marker")
    timestamp: datetime = Field(description="Server time of the check (UTC)")
    version: Optional[str] = Field(default=None, description="Application version")
    uptime_seconds: float = Field(description="Seconds since the service started")
