"""
Bookstore API - Generic Repository
===================================

What:  Persistence access for one ORM model over an AsyncSession.
How:   Reads return ORM objects (or None); writes return a bool reporting
       whether the database actually changed, so callers can tell a
       no-op apart from success without catching exceptions.

Methods:
    find_all()        → List[ModelT], ordered by id
    find_by_id(id)    → Optional[ModelT]  (None for ids outside 1..MAX_ID)
    exists(id)        → bool
    create(entity)    → bool  (True once the database assigned an id)
    update(entity)    → bool  (True when a row with entity.id was rewritten)
    delete(entity)    → bool  (True when a row with entity.id was removed)

Transactions:
    The repository only flushes. Commit and rollback belong to the session
    dependency (bookstore.database.get_db_session), so every call made
    during one request shares one transaction.
"""

import logging
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete, inspect, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from bookstore.database import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

# Primary keys are 32-bit INTEGER columns; larger ids cannot match a row
MAX_ID = 2**31 - 1


def _in_id_range(entity_id: Optional[int]) -> bool:
    return entity_id is not None and 1 <= entity_id <= MAX_ID


class SQLAlchemyRepository(Generic[ModelT]):
    """
    CRUD access to the table behind `model`.

    Subclasses only set `model`; models are expected to have an integer
    primary key named `id`.
    """

    model: Type[ModelT]

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_all(self) -> List[ModelT]:
        result = await self._session.execute(
            select(self.model).order_by(self.model.id)
        )
        return list(result.scalars().all())

    async def find_by_id(self, entity_id: int) -> Optional[ModelT]:
        if not _in_id_range(entity_id):
            return None
        return await self._session.get(self.model, entity_id)

    async def exists(self, entity_id: int) -> bool:
        if not _in_id_range(entity_id):
            return False
        found = await self._session.scalar(
            select(self.model.id).where(self.model.id == entity_id)
        )
        return found is not None

    async def create(self, entity: ModelT) -> bool:
        self._session.add(entity)
        # Flush sends the INSERT so the database-assigned id is available now
        await self._session.flush()
        logger.debug("Inserted %s id=%s", self.model.__name__, entity.id)
        return entity.id is not None

    async def update(self, entity: ModelT) -> bool:
        """
        Replaces every mutable column of the row with entity.id.

        `entity` is usually a transient object built from an update DTO, so
        the write is an UPDATE statement rather than a session merge.
        """
        if not _in_id_range(entity.id):
            return False
        result = await self._session.execute(
            update(self.model)
            .where(self.model.id == entity.id)
            .values(**self._mutable_values(entity))
        )
        return result.rowcount > 0

    async def delete(self, entity: ModelT) -> bool:
        if not _in_id_range(entity.id):
            return False
        result = await self._session.execute(
            delete(self.model).where(self.model.id == entity.id)
        )
        return result.rowcount > 0

    def _mutable_values(self, entity: ModelT) -> Dict[str, Any]:
        """Column values of `entity`, primary key excluded."""
        return {
            attr.key: getattr(entity, attr.key)
            for attr in inspect(self.model).column_attrs
            if attr.key != "id"
        }
