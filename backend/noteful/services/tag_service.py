"""
Noteful Backend — Tag Service
==============================

What:  Tag CRUD. Mirrors FolderService, with two differences:
       - every write recomputes `normalized` from the name, and listings sort on it
       - delete removes the tag from each note's tag set instead of
         clearing a single reference
"""

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from noteful.exceptions import DuplicateKeyError, NotFoundError
from noteful.models.tag import Tag, normalize_tag_name
from noteful.repositories.note_repository import NoteRepository
from noteful.repositories.tag_repository import TagRepository
from noteful.schemas.tag import TagResponse
from noteful.services.validation import parse_id, require_text

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "That tag already exists"


class TagService:
    """Business logic for tags."""

    async def list_tags(self, db: AsyncSession) -> List[TagResponse]:
        tags = await TagRepository(db).list_all()
        return [TagResponse.model_validate(tag) for tag in tags]

    async def get_tag(self, db: AsyncSession, tag_id: str) -> TagResponse:
        uid = parse_id(tag_id)
        tag = await TagRepository(db).get_by_id(uid)
        if tag is None:
            raise NotFoundError(resource="tag", resource_id=tag_id)
        return TagResponse.model_validate(tag)

    async def create_tag(self, db: AsyncSession, name: Optional[str]) -> TagResponse:
        name = require_text(name, "name")
        tag = Tag(name=name, normalized=normalize_tag_name(name))
        try:
            tag = await TagRepository(db).insert(tag)
        except DuplicateKeyError as exc:
            raise DuplicateKeyError(DUPLICATE_MESSAGE, context=exc.context) from exc

        logger.info("Tag created: %s (%s)", tag.id, tag.name)
        return TagResponse.model_validate(tag)

    async def update_tag(
        self,
        db: AsyncSession,
        tag_id: str,
        name: Optional[str],
    ) -> TagResponse:
        uid = parse_id(tag_id)
        name = require_text(name, "name")
        fields = {"name": name, "normalized": normalize_tag_name(name)}
        try:
            tag = await TagRepository(db).update_by_id(uid, fields)
        except DuplicateKeyError as exc:
            raise DuplicateKeyError(DUPLICATE_MESSAGE, context=exc.context) from exc

        if tag is None:
            raise NotFoundError(resource="tag", resource_id=tag_id)
        logger.info("Tag updated: %s (%s)", tag.id, tag.name)
        return TagResponse.model_validate(tag)

    async def delete_tag(self, db: AsyncSession, tag_id: str) -> None:
        """Delete a tag and pull it out of every note that carries it."""
        uid = parse_id(tag_id)
        deleted = await TagRepository(db).delete_by_id(uid)
        removed = await NoteRepository(db).remove_tag_reference(uid)
        logger.info("Tag %s deleted (existed=%s); removed from %d notes", uid, deleted, removed)


tag_service = TagService()
