"""
Helpers shared across the SQLAlchemy repositories.

SqlRepository wraps the common query/command patterns so each repository only
declares its model, its read schema and its field mapping.
"""

import logging
from typing import Any, Awaitable, Callable, Dict, Generic, List, Optional, Type, TypeVar

from infrastructure.database.connection import retry_on_db_lock, serialized_write
from pydantic import BaseModel
from sqlalchemy import Select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

logger = logging.getLogger("CRUD")

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class SqlRepository(Generic[SchemaT]):
    """
    Base class for the resource repositories.

    Queries return read schemas (detached snapshots), or None when the database
    call fails. Commands return True on commit and False when nothing was written.
    """

    model: Type[Any]
    schema: Type[SchemaT]

    def __init__(self, db: AsyncSession, log: Optional[logging.Logger] = None):
        self.db = db
        self.logger = log or logger

    @property
    def name(self) -> str:
        return type(self).__name__

    def _log_failure(self, call: str, exc: Exception) -> None:
        self.logger.error(f"[{self.name}] {call} failed, error message: {exc}")

    async def _rollback(self) -> None:
        try:
            await self.db.rollback()
        except SQLAlchemyError as exc:
            self._log_failure("rollback", exc)

    @retry_on_db_lock()
    async def _commit(self, stage: Callable[[], Awaitable[bool]]) -> bool:
        """
        Stage changes with `stage()` and commit them under the write lock.

        The session is rolled back before an error leaves this method, so a
        retried attempt stages its changes again on a clean session.
        """
        try:
            if not await stage():
                return False
            async with serialized_write():
                await self.db.commit()
            return True
        except SQLAlchemyError:
            await self._rollback()
            raise

    async def _fetch_all(self, query: Select, call: str) -> Optional[List[SchemaT]]:
        try:
            result = await self.db.execute(query.order_by(self.model.id))
            return [self.schema.model_validate(row) for row in result.scalars().all()]
        except SQLAlchemyError as exc:
            self._log_failure(call, exc)
            await self._rollback()
            return None

    async def _fetch_one(self, entity_id: int, call: str) -> Optional[SchemaT]:
        try:
            row = await self.db.get(self.model, entity_id)
            return self.schema.model_validate(row) if row is not None else None
        except SQLAlchemyError as exc:
            self._log_failure(call, exc)
            await self._rollback()
            return None

    async def get_all(self) -> Optional[List[SchemaT]]:
        """Get every stored entity ordered by ID."""
        return await self._fetch_all(select(self.model), "get_all()")

    async def _insert(self, values: Dict[str, Any]) -> bool:
        async def stage() -> bool:
            self.db.add(self.model(**values))
            return True

        try:
            return await self._commit(stage)
        except SQLAlchemyError as exc:
            self._log_failure(f"create({values})", exc)
            return False

    async def _update(self, entity_id: int, values: Dict[str, Any]) -> bool:
        async def stage() -> bool:
            row = await self.db.get(self.model, entity_id)
            if row is None:
                self.logger.warning(f"[{self.name}] update() found no row with id {entity_id}")
                return False
            for field, value in values.items():
                setattr(row, field, value)
            return True

        try:
            return await self._commit(stage)
        except SQLAlchemyError as exc:
            self._log_failure(f"update({entity_id})", exc)
            return False

    async def delete(self, entity_id: int) -> bool:
        """Delete an entity permanently. Returns False when it does not exist."""

        async def stage() -> bool:
            row = await self.db.get(self.model, entity_id)
            if row is None:
                self.logger.warning(f"[{self.name}] delete() found no row with id {entity_id}")
                return False
            await self.db.delete(row)
            return True

        try:
            deleted = await self._commit(stage)
        except SQLAlchemyError as exc:
            self._log_failure(f"delete({entity_id})", exc)
            return False
        if deleted:
            # ON DELETE rules ran in the database; cached children are stale
            self.db.expire_all()
        return deleted
