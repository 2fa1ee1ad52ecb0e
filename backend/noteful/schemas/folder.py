"""Folder request/response schemas."""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import Field

from noteful.schemas.base import CamelModel


class FolderBody(CamelModel):
    """
    Body of POST /api/folders and PUT /api/folders/{id}.

    `name` is optional at the schema level so that a missing name is reported
    by the service as "Missing `name` in request body" rather than as a
    generic schema error.
    """
    name: Optional[str] = Field(default=None, description="Folder name (unique)")


class FolderResponse(CamelModel):
    id: uuid.UUID = Field(description="Unique folder identifier")
    name: str = Field(description="Folder name")
    created_at: datetime = Field(description="Creation timestamp (UTC)")
    updated_at: datetime = Field(description="Last modification timestamp (UTC)")
