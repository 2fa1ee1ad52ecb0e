"""
Repository for note storage, filtering and cross-reference cleanup.

Notes are always returned with `tags` populated. Writes to the note_tags link
table go through replace_tags(); the two cascade helpers are the only way
folder and tag deletion reach into note records.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional
from uuid import UUID

from sqlalchemy import delete, insert, or_, select, update

from noteful.models.note import Note, note_tags
from noteful.repositories.base import EntityRepository, store_errors

logger = logging.getLogger(__name__)


def _like_pattern(term: str) -> str:
    """Substring pattern for ILIKE with LIKE wildcards in the term escaped."""
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def _unique(ids: Iterable[UUID]) -> List[UUID]:
    return list(dict.fromkeys(ids))


class NoteRepository(EntityRepository[Note]):
    """Notes plus their tag links."""

    model = Note

    async def get_by_id(self, entity_id: UUID) -> Optional[Note]:
        # populate_existing reloads tags for notes already in the identity map
        stmt = (
            select(Note)
            .where(Note.id == entity_id)
            .execution_options(populate_existing=True)
        )
        with store_errors(self.table, "get_by_id"):
            result = await self.session.scalars(stmt)
            return result.one_or_none()

    async def insert_with_tags(self, note: Note, tag_ids: Iterable[UUID]) -> Note:
        await self.insert(note)
        await self.replace_tags(note.id, tag_ids)
        return await self.get_by_id(note.id)

    async def update_with_tags(
        self,
        note_id: UUID,
        fields: Dict[str, Any],
        tag_ids: Iterable[UUID],
    ) -> Optional[Note]:
        note = await self.update_by_id(note_id, fields)
        if note is None:
            return None
        await self.replace_tags(note_id, tag_ids)
        return await self.get_by_id(note_id)

    async def replace_tags(self, note_id: UUID, tag_ids: Iterable[UUID]) -> None:
        """Make `tag_ids` the complete tag set of the note."""
        rows = [{"note_id": note_id, "tag_id": tag_id} for tag_id in _unique(tag_ids)]
        with store_errors("note_tags", "replace_tags"):
            await self.session.execute(delete(note_tags).where(note_tags.c.note_id == note_id))
            if rows:
                await self.session.execute(insert(note_tags), rows)

    async def delete_by_id(self, entity_id: UUID) -> bool:
        with store_errors("note_tags", "delete_by_id"):
            await self.session.execute(delete(note_tags).where(note_tags.c.note_id == entity_id))
        return await super().delete_by_id(entity_id)

    async def search(
        self,
        search_term: Optional[str] = None,
        folder_id: Optional[UUID] = None,
        tag_id: Optional[UUID] = None,
    ) -> List[Note]:
        """
        List notes matching every provided filter, most recently updated first.

        search_term: case-insensitive substring of title OR content
        folder_id:   exact folder match
        tag_id:      note is linked to this tag
        """
        criteria = []
        if search_term:
            pattern = _like_pattern(search_term)
            criteria.append(
                or_(
                    Note.title.ilike(pattern, escape="\\"),
                    Note.content.ilike(pattern, escape="\\"),
                )
            )
        if folder_id is not None:
            criteria.append(Note.folder_id == folder_id)
        if tag_id is not None:
            criteria.append(
                Note.id.in_(select(note_tags.c.note_id).where(note_tags.c.tag_id == tag_id))
            )
        return await self.find(criteria, order_by=[Note.updated_at.desc()])

    # ── Cascade cleanup ───────────────────────────────────────────────────

    async def clear_folder_reference(self, folder_id: UUID) -> int:
        """Unset folder_id on every note filed in `folder_id`. Returns notes touched."""
        stmt = (
            update(Note)
            .where(Note.folder_id == folder_id)
            .values(folder_id=None)
            .execution_options(synchronize_session="fetch")
        )
        with store_errors(self.table, "clear_folder_reference"):
            result = await self.session.execute(stmt)
        logger.debug("Cleared folder %s from %d notes", folder_id, result.rowcount)
        return result.rowcount

    async def remove_tag_reference(self, tag_id: UUID) -> int:
        """Drop `tag_id` from every note's tags, leaving their other tags alone."""
        stmt = delete(note_tags).where(note_tags.c.tag_id == tag_id)
        with store_errors("note_tags", "remove_tag_reference"):
            result = await self.session.execute(stmt)
        logger.debug("Removed tag %s from %d notes", tag_id, result.rowcount)
        return result.rowcount
