"""
Noteful Backend — Notes Route Handlers
=======================================

What:  /api/notes CRUD plus filtered listing.
How:   Extracts query parameters and bodies, delegates to NoteService.

Serialization:
    Note responses use response_model_exclude_none, so a note without a
    folder or content omits those keys instead of sending null.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.database import get_db_session
from noteful.schemas.common import ErrorResponse
from noteful.schemas.note import NoteBody, NoteFilter, NoteResponse
from noteful.services.note_service import note_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Notes"])

BAD_REQUEST = {
    400: {"description": "Invalid id, missing title or duplicate title", "model": ErrorResponse},
}


@router.get(
    "/notes",
    response_model=List[NoteResponse],
    response_model_exclude_none=True,
    responses=BAD_REQUEST,
    summary="List notes, optionally filtered",
    description=(
        "Returns every note matching all supplied filters, most recently "
        "updated first, with tags populated."
    ),
)
async def list_notes(
    search_term: Optional[str] = Query(
        default=None,
        alias="searchTerm",
        description="Case-insensitive substring of title or content",
    ),
    folder_id: Optional[str] = Query(default=None, alias="folderId", description="Only notes in this folder"),
    tag_id: Optional[str] = Query(default=None, alias="tagId", description="Only notes carrying this tag"),
    db: AsyncSession = Depends(get_db_session),
) -> List[NoteResponse]:
    filters = NoteFilter(search_term=search_term, folder_id=folder_id, tag_id=tag_id)
    return await note_service.list_notes(db, filters)


@router.get(
    "/notes/{note_id}",
    response_model=NoteResponse,
    response_model_exclude_none=True,
    responses={**BAD_REQUEST, 404: {"description": "Not found", "model": ErrorResponse}},
    summary="Get a single note by ID",
)
async def get_note(note_id: str, db: AsyncSession = Depends(get_db_session)) -> NoteResponse:
    return await note_service.get_note(db, note_id)


@router.post(
    "/notes",
    status_code=201,
    response_model=NoteResponse,
    response_model_exclude_none=True,
    responses=BAD_REQUEST,
    summary="Create a note",
)
async def create_note(
    body: NoteBody,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    result = await note_service.create_note(db, body)
    response.headers["Location"] = f"{request.url.path}/{result.id}"
    return result


@router.put(
    "/notes/{note_id}",
    response_model=NoteResponse,
    response_model_exclude_none=True,
    responses=BAD_REQUEST,
    summary="Replace a note",
    description="Full replace: title, content, folderId and tags all take the body's values.",
)
async def update_note(
    note_id: str,
    body: NoteBody,
    db: AsyncSession = Depends(get_db_session),
) -> NoteResponse:
    return await note_service.update_note(db, note_id, body)


@router.delete(
    "/notes/{note_id}",
    status_code=204,
    response_class=Response,
    responses=BAD_REQUEST,
    summary="Delete a note",
)
async def delete_note(note_id: str, db: AsyncSession = Depends(get_db_session)) -> Response:
    await note_service.delete_note(db, note_id)
    return Response(status_code=204)
