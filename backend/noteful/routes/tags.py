"""/api/tags CRUD endpoints. Same shape as the folder routes."""

from typing import List

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.database import get_db_session
from noteful.schemas.common import ErrorResponse
from noteful.schemas.tag import TagBody, TagResponse
from noteful.services.tag_service import tag_service

router = APIRouter(prefix="/api", tags=["Tags"])

BAD_REQUEST = {400: {"description": "Invalid id, missing name or duplicate", "model": ErrorResponse}}


@router.get("/tags", response_model=List[TagResponse], summary="List all tags")
async def list_tags(db: AsyncSession = Depends(get_db_session)) -> List[TagResponse]:
    return await tag_service.list_tags(db)


@router.get(
    "/tags/{tag_id}",
    response_model=TagResponse,
    responses={**BAD_REQUEST, 404: {"description": "Not found", "model": ErrorResponse}},
    summary="Get a single tag by ID",
)
async def get_tag(tag_id: str, db: AsyncSession = Depends(get_db_session)) -> TagResponse:
    return await tag_service.get_tag(db, tag_id)


@router.post(
    "/tags",
    status_code=201,
    response_model=TagResponse,
    responses=BAD_REQUEST,
    summary="Create a tag",
)
async def create_tag(
    body: TagBody,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db_session),
) -> TagResponse:
    result = await tag_service.create_tag(db, body.name)
    response.headers["Location"] = f"{request.url.path}/{result.id}"
    return result


@router.put("/tags/{tag_id}", response_model=TagResponse, responses=BAD_REQUEST, summary="Rename a tag")
async def update_tag(
    tag_id: str,
    body: TagBody,
    db: AsyncSession = Depends(get_db_session),
) -> TagResponse:
    return await tag_service.update_tag(db, tag_id, body.name)


@router.delete(
    "/tags/{tag_id}",
    status_code=204,
    response_class=Response,
    responses=BAD_REQUEST,
    summary="Delete a tag and remove it from all notes",
)
async def delete_tag(tag_id: str, db: AsyncSession = Depends(get_db_session)) -> Response:
    await tag_service.delete_tag(db, tag_id)
    return Response(status_code=204)
