"""
Noteful Backend — Note Service
===============================

What:  Note CRUD and filtered listing. Notes carry an optional folder
       reference and a set of tag references; responses always embed the
       full tag records ("populated") rather than bare ids.
Who:   Called by the /api/notes route handlers.

Validation order (create / update):
    1. Path id format (update only)       → InvalidIdentifierError
    2. title present and non-empty        → ValidationError
    3. folderId format ("" = no folder)   → InvalidIdentifierError
    4. every tag id format                → InvalidIdentifierError
    All checks run before the first store call.

References are checked for format only. A note may point at a folder or tag
id that does not exist; such tags are simply absent from populated output.
"""

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from noteful.exceptions import DuplicateKeyError, NotFoundError
from noteful.models.note import Note
from noteful.repositories.note_repository import NoteRepository
from noteful.schemas.note import NoteBody, NoteFilter, NoteResponse
from noteful.services.validation import (
    parse_id,
    parse_id_list,
    parse_optional_id,
    require_text,
)

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "A note with that title already exists"


class NoteService:
    """
    Business logic for notes.

    Responsibilities:
        - list_notes(): AND-combined searchTerm / folderId / tagId filters,
          newest update first
        - get_note(), create_note(), update_note(), delete_note()

    PUT semantics are full replace: title, content, folderId and tags all
    take the values in the body, and anything omitted is cleared.
    """

    async def list_notes(
        self,
        db: AsyncSession,
        filters: Optional[NoteFilter] = None,
    ) -> List[NoteResponse]:
        filters = filters or NoteFilter()
        folder_id = parse_optional_id(filters.folder_id, "folderId")
        tag_id = parse_optional_id(filters.tag_id, "tagId")

        notes = await NoteRepository(db).search(
            search_term=filters.search_term or None,
            folder_id=folder_id,
            tag_id=tag_id,
        )
        return [NoteResponse.model_validate(note) for note in notes]

    async def get_note(self, db: AsyncSession, note_id: str) -> NoteResponse:
        """
        Raises:
            InvalidIdentifierError: note_id is not a well-formed id (→ 400)
            NotFoundError: no such note (→ generic 404)
        """
        uid = parse_id(note_id)
        note = await NoteRepository(db).get_by_id(uid)
        if note is None:
            raise NotFoundError(resource="note", resource_id=note_id)
        return NoteResponse.model_validate(note)

    async def create_note(self, db: AsyncSession, body: NoteBody) -> NoteResponse:
        title = require_text(body.title, "title")
        folder_id = parse_optional_id(body.folder_id, "folderId")
        tag_ids = parse_id_list(body.tags, "tags")

        note = Note(title=title, content=body.content, folder_id=folder_id)
        try:
            note = await NoteRepository(db).insert_with_tags(note, tag_ids)
        except DuplicateKeyError as exc:
            raise DuplicateKeyError(DUPLICATE_MESSAGE, context=exc.context) from exc

        logger.info("Note created: %s (folder=%s, tags=%d)", note.id, folder_id, len(tag_ids))
        return NoteResponse.model_validate(note)

    async def update_note(self, db: AsyncSession, note_id: str, body: NoteBody) -> NoteResponse:
        uid = parse_id(note_id)
        title = require_text(body.title, "title")
        folder_id = parse_optional_id(body.folder_id, "folderId")
        tag_ids = parse_id_list(body.tags, "tags")

        fields = {"title": title, "content": body.content, "folder_id": folder_id}
        try:
            note = await NoteRepository(db).update_with_tags(uid, fields, tag_ids)
        except DuplicateKeyError as exc:
            raise DuplicateKeyError(DUPLICATE_MESSAGE, context=exc.context) from exc

        if note is None:
            raise NotFoundError(resource="note", resource_id=note_id)
        logger.info("Note updated: %s", note.id)
        return NoteResponse.model_validate(note)

    async def delete_note(self, db: AsyncSession, note_id: str) -> None:
        uid = parse_id(note_id)
        deleted = await NoteRepository(db).delete_by_id(uid)
        logger.info("Note %s deleted (existed=%s)", uid, deleted)


# ── Singleton Instance ────────────────────────────────────────────────────
note_service = NoteService()
