"""Repository for tag storage and retrieval."""

from typing import List

from noteful.models.tag import Tag
from noteful.repositories.base import EntityRepository


class TagRepository(EntityRepository[Tag]):
    """Tags, listed by their case-insensitive sort key."""

    model = Tag

    async def list_all(self) -> List[Tag]:
        return await self.find(order_by=[Tag.normalized.asc(), Tag.name.asc()])
