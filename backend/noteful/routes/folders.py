"""
Noteful Backend — Folder Route Handlers
========================================

What:  /api/folders CRUD endpoints.
How:   Delegates to FolderService; errors are formatted by the global
       exception handlers registered in main.py.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.database import get_db_session
from noteful.schemas.common import ErrorResponse
from noteful.schemas.folder import FolderBody, FolderResponse
from noteful.services.folder_service import folder_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Folders"])

BAD_REQUEST = {400: {"description": "Invalid id, missing name or duplicate", "model": ErrorResponse}}


@router.get(
    "/folders",
    response_model=List[FolderResponse],
    summary="List all folders sorted by name",
)
async def list_folders(db: AsyncSession = Depends(get_db_session)) -> List[FolderResponse]:
    return await folder_service.list_folders(db)


@router.get(
    "/folders/{folder_id}",
    response_model=FolderResponse,
    responses={**BAD_REQUEST, 404: {"description": "Not found", "model": ErrorResponse}},
    summary="Get a single folder by ID",
)
async def get_folder(folder_id: str, db: AsyncSession = Depends(get_db_session)) -> FolderResponse:
    return await folder_service.get_folder(db, folder_id)


@router.post(
    "/folders",
    status_code=201,
    response_model=FolderResponse,
    responses=BAD_REQUEST,
    summary="Create a folder",
)
async def create_folder(
    body: FolderBody,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db_session),
) -> FolderResponse:
    """Returns the new folder with a Location header pointing at it."""
    result = await folder_service.create_folder(db, body.name)
    response.headers["Location"] = f"{request.url.path}/{result.id}"
    return result


@router.put(
    "/folders/{folder_id}",
    response_model=FolderResponse,
    responses=BAD_REQUEST,
    summary="Rename a folder",
)
async def update_folder(
    folder_id: str,
    body: FolderBody,
    db: AsyncSession = Depends(get_db_session),
) -> FolderResponse:
    return await folder_service.update_folder(db, folder_id, body.name)


@router.delete(
    "/folders/{folder_id}",
    status_code=204,
    response_class=Response,
    responses=BAD_REQUEST,
    summary="Delete a folder and detach it from its notes",
)
async def delete_folder(folder_id: str, db: AsyncSession = Depends(get_db_session)) -> Response:
    await folder_service.delete_folder(db, folder_id)
    return Response(status_code=204)
