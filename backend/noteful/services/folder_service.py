"""
Noteful Backend — Folder Service
=================================

What:  Folder CRUD with name validation, duplicate translation and the
       folder → note cascade on delete.
Who:   Called by the /api/folders route handlers.

Delete Flow:
    1. Validate id format
    2. Delete the folder row
    3. Unset folder_id on every note filed in it

    Steps 2 and 3 run in the request's session and commit together when the
    request succeeds; nothing is retried if either step fails.
"""

import logging
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from noteful.exceptions import DuplicateKeyError, NotFoundError
from noteful.models.folder import Folder
from noteful.repositories.folder_repository import FolderRepository
from noteful.repositories.note_repository import NoteRepository
from noteful.schemas.folder import FolderResponse
from noteful.services.validation import parse_id, require_text

logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "That folder already exists"


class FolderService:
    """
    Business logic for folders.

    Responsibilities:
        - list_folders(): every folder, sorted by name
        - get_folder() / create_folder() / update_folder()
        - delete_folder(): delete and detach notes
    """

    async def list_folders(self, db: AsyncSession) -> List[FolderResponse]:
        folders = await FolderRepository(db).list_all()
        return [FolderResponse.model_validate(folder) for folder in folders]

    async def get_folder(self, db: AsyncSession, folder_id: str) -> FolderResponse:
        """
        Raises:
            InvalidIdentifierError: folder_id is not a well-formed id (→ 400)
            NotFoundError: no such folder (→ generic 404)
        """
        uid = parse_id(folder_id)
        folder = await FolderRepository(db).get_by_id(uid)
        if folder is None:
            raise NotFoundError(resource="folder", resource_id=folder_id)
        return FolderResponse.model_validate(folder)

    async def create_folder(self, db: AsyncSession, name: Optional[str]) -> FolderResponse:
        """
        Raises:
            ValidationError: name missing or empty (→ 400)
            DuplicateKeyError: a folder with this name exists (→ 400)
        """
        name = require_text(name, "name")
        try:
            folder = await FolderRepository(db).insert(Folder(name=name))
        except DuplicateKeyError as exc:
            raise DuplicateKeyError(DUPLICATE_MESSAGE, context=exc.context) from exc

        logger.info("Folder created: %s (%s)", folder.id, folder.name)
        return FolderResponse.model_validate(folder)

    async def update_folder(
        self,
        db: AsyncSession,
        folder_id: str,
        name: Optional[str],
    ) -> FolderResponse:
        uid = parse_id(folder_id)
        name = require_text(name, "name")
        try:
            folder = await FolderRepository(db).update_by_id(uid, {"name": name})
        except DuplicateKeyError as exc:
            raise DuplicateKeyError(DUPLICATE_MESSAGE, context=exc.context) from exc

        if folder is None:
            raise NotFoundError(resource="folder", resource_id=folder_id)
        logger.info("Folder updated: %s (%s)", folder.id, folder.name)
        return FolderResponse.model_validate(folder)

    async def delete_folder(self, db: AsyncSession, folder_id: str) -> None:
        """
        Delete a folder and detach it from its notes.

        Deleting an id that does not exist is not an error; the notes
        cleanup still runs so stale references to it are cleared.
        """
        uid = parse_id(folder_id)
        deleted = await FolderRepository(db).delete_by_id(uid)
        detached = await NoteRepository(db).clear_folder_reference(uid)
        logger.info(
            "Folder %s deleted (existed=%s); detached from %d notes",
            uid, deleted, detached,
        )


# ── Singleton Instance ────────────────────────────────────────────────────
folder_service = FolderService()
