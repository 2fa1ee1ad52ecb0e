"""
Noteful Backend — Note Schemas
===============================

What:  Request body, query filter and response models for /api/notes.

Body field typing:
    Ids are accepted as any JSON value and checked by the service, so a
    malformed `folderId` or tag id (including a number) is reported as
    "The `folderId` is not valid" (400) instead of a schema error. `title`
    is optional for the same reason.
"""

import uuid
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from noteful.schemas.base import CamelModel
from noteful.schemas.tag import TagResponse


class NoteBody(CamelModel):
    """
    Body of POST /api/notes and PUT /api/notes/{id}.

    PUT replaces title, content, folderId and tags wholesale: a field left
    out of a PUT body is cleared, not preserved.
    """
    title: Optional[str] = Field(default=None, description="Note title (unique)")
    content: Optional[str] = Field(default=None, description="Note body text")
    folder_id: Optional[Any] = Field(
        default=None,
        description="Folder id; empty string or null means no folder",
    )
    tags: Optional[List[Any]] = Field(default=None, description="Tag ids")


class NoteFilter(BaseModel):
    """Optional listing filters. All provided filters must match (logical AND)."""
    search_term: Optional[str] = None
    folder_id: Optional[str] = None
    tag_id: Optional[str] = None


class NoteResponse(CamelModel):
    """
    Full representation of a note with its tags populated.

    Routes serialize this with exclude_none, so an unfiled note has no
    `folderId` key at all.
    """
    id: uuid.UUID = Field(description="Unique note identifier")
    title: str = Field(description="Note title")
    content: Optional[str] = Field(default=None, description="Note body text")
    folder_id: Optional[uuid.UUID] = Field(default=None, description="Folder this note is filed in")
    tags: List[TagResponse] = Field(default_factory=list, description="Populated tag records")
    created_at: datetime = Field(description="Creation timestamp (UTC)")
    updated_at: datetime = Field(description="Last modification timestamp (UTC)")
