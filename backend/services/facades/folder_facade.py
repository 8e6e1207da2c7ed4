"""Folder facade."""

import logging
from typing import Optional

from domain.repositories import FolderStore

from .resource_facade import FacadeResponse, ResourceFacade

logger = logging.getLogger("FolderFacade")


class FolderFacade(ResourceFacade):
    resource = "Folder"
    invalid_message = "Invalid folder data"

    def __init__(self, store: FolderStore, log: Optional[logging.Logger] = None):
        super().__init__(store, log or logger)

    async def get_by_id(self, folder_id: int) -> FacadeResponse:
        folder = await self.store.get_folder_by_id(folder_id)
        return self._entity_result(folder, f"get_folder_by_id({folder_id})")
