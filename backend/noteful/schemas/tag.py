"""Tag request/response schemas."""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import Field

from noteful.schemas.base import CamelModel


class TagBody(CamelModel):
    """Body of POST /api/tags and PUT /api/tags/{id}."""
    name: Optional[str] = Field(default=None, description="Tag name (unique)")


class TagResponse(CamelModel):
    id: uuid.UUID = Field(description="Unique tag identifier")
    name: str = Field(description="Tag name")
    normalized: str = Field(description="Lowercase sort key derived from name")
    created_at: datetime = Field(description="Creation timestamp (UTC)")
    updated_at: datetime = Field(description="Last modification timestamp (UTC)")
