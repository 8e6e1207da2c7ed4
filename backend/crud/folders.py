"""
Repository for Folder entities.
"""

from typing import Optional

import schemas
from infrastructure.database import models

from .helpers import SqlRepository

_WRITABLE_FIELDS = {"name", "description"}


class FolderRepository(SqlRepository[schemas.Folder]):
    """SQLAlchemy implementation of the FolderStore contract."""

    model = models.Folder
    schema = schemas.Folder

    async def get_folder_by_id(self, folder_id: int) -> Optional[schemas.Folder]:
        return await self._fetch_one(folder_id, f"get_folder_by_id({folder_id})")

    async def create(self, folder: schemas.FolderCreate) -> bool:
        return await self._insert(folder.model_dump(include=_WRITABLE_FIELDS))

    async def update(self, folder: schemas.FolderUpdate) -> bool:
        return await self._update(folder.id, folder.model_dump(include=_WRITABLE_FIELDS))
