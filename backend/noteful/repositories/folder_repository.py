"""Repository for folder storage and retrieval."""

from typing import List

from noteful.models.folder import Folder
from noteful.repositories.base import EntityRepository


class FolderRepository(EntityRepository[Folder]):
    """Folders, listed alphabetically by name."""

    model = Folder

    async def list_all(self) -> List[Folder]:
        return await self.find(order_by=[Folder.name.asc()])
