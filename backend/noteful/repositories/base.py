"""Generic async repository shared by the folder, tag and note stores."""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Generic, Iterator, List, Optional, Sequence, Type, TypeVar
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from noteful.database import Base
from noteful.exceptions import DatabaseError, DuplicateKeyError
from noteful.models.mixins import utcnow

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


@contextmanager
def store_errors(table: str, operation: str) -> Iterator[None]:
    """
    Reclassify SQLAlchemy failures raised inside the block.

    IntegrityError → DuplicateKeyError (unique name/title taken)
    SQLAlchemyError → DatabaseError (generic 500, details logged only)
    """
    try:
        yield
    except IntegrityError as exc:
        raise DuplicateKeyError(
            context={"table": table, "operation": operation},
        ) from exc
    except SQLAlchemyError as exc:
        logger.error("Store error during %s on %s: %s", operation, table, exc, exc_info=True)
        raise DatabaseError(
            context={"table": table, "operation": operation, "error_type": type(exc).__name__},
        ) from exc


class EntityRepository(Generic[ModelT]):
    """
    CRUD over a single entity table.

    Subclasses set `model`. All methods flush but never commit; the request's
    session dependency owns the transaction.
    """

    model: Type[ModelT]

    def __init__(self, session: AsyncSession):
        self.session = session

    @property
    def table(self) -> str:
        return self.model.__tablename__

    async def insert(self, entity: ModelT) -> ModelT:
        with store_errors(self.table, "insert"):
            self.session.add(entity)
            await self.session.flush()
        return entity

    async def get_by_id(self, entity_id: UUID) -> Optional[ModelT]:
        with store_errors(self.table, "get_by_id"):
            return await self.session.get(self.model, entity_id)

    async def find(
        self,
        criteria: Sequence[Any] = (),
        order_by: Sequence[Any] = (),
    ) -> List[ModelT]:
        stmt = select(self.model).where(*criteria).order_by(*order_by)
        with store_errors(self.table, "find"):
            result = await self.session.scalars(stmt)
            return list(result.all())

    async def update_by_id(self, entity_id: UUID, fields: Dict[str, Any]) -> Optional[ModelT]:
        """Apply `fields`, refresh updated_at and flush. None if the id is unknown."""
        entity = await self.get_by_id(entity_id)
        if entity is None:
            return None
        for name, value in fields.items():
            setattr(entity, name, value)
        entity.updated_at = utcnow()
        with store_errors(self.table, "update_by_id"):
            await self.session.flush()
        return entity

    async def delete_by_id(self, entity_id: UUID) -> bool:
        """Delete the row. Returns False when nothing matched."""
        stmt = delete(self.model).where(self.model.id == entity_id)
        with store_errors(self.table, "delete_by_id"):
            result = await self.session.execute(stmt)
        return result.rowcount > 0
