"""
Base facade shared by the Deck, Flashcard and Folder endpoints.

A facade checks that its input is present, makes one store call and maps the
outcome to a FacadeResponse. It keeps no state between calls and never raises:
store failures come back as a status code plus a fixed message.
"""

import logging
from dataclasses import dataclass
from typing import Any, List, Optional

import schemas
from fastapi import status


@dataclass(frozen=True)
class FacadeResponse:
    """HTTP status code and JSON-able body produced by a facade call."""

    status_code: int
    content: Any


class ResourceFacade:
    """
    Status/message mapping common to every resource.

    Subclasses set `resource` (used in every message) and `invalid_message`,
    and implement the store calls for their resource.
    """

    resource: str = "Resource"
    invalid_message: str = "Invalid resource data"

    def __init__(self, store: Any, log: logging.Logger):
        self.store = store
        self.logger = log

    # =========================================================================
    # Response shapes
    # =========================================================================

    @staticmethod
    def _ok(content: Any) -> FacadeResponse:
        return FacadeResponse(status.HTTP_200_OK, content)

    @staticmethod
    def _bad_request(message: str) -> FacadeResponse:
        return FacadeResponse(status.HTTP_400_BAD_REQUEST, message)

    @staticmethod
    def _not_found(message: str) -> FacadeResponse:
        return FacadeResponse(status.HTTP_404_NOT_FOUND, message)

    def _warn(self, message: str, call: str) -> None:
        self.logger.warning(f"[{type(self).__name__}] {message} while executing {call}")

    # =========================================================================
    # Mapping helpers
    # =========================================================================

    def _list_result(self, items: Optional[List[Any]], call: str, missing_status: int) -> FacadeResponse:
        if items is None:
            message = f"{self.resource} list not found"
            self._warn(message, call)
            return FacadeResponse(missing_status, message)
        return self._ok(items)

    def _entity_result(self, entity: Optional[Any], call: str) -> FacadeResponse:
        if entity is None:
            message = f"{self.resource} not found"
            self._warn(message, call)
            return self._not_found(message)
        return self._ok(entity)

    def _invalid(self, call: str) -> FacadeResponse:
        self._warn(self.invalid_message, call)
        return self._bad_request(self.invalid_message)

    async def _create(self, entity: Any) -> FacadeResponse:
        if await self.store.create(entity):
            return self._ok(schemas.OperationResult(success=True, message=f"{self.resource} created successfully"))
        self._warn(f"{self.resource} creation failed", f"create({entity!r})")
        return self._ok(schemas.OperationResult(success=False, message=f"{self.resource} creation failed"))

    # =========================================================================
    # Operations shared by every resource
    # =========================================================================

    async def list_all(self) -> FacadeResponse:
        """List every entity; an absent collection is reported as 404."""
        items = await self.store.get_all()
        return self._list_result(items, "get_all()", status.HTTP_404_NOT_FOUND)

    async def create(self, entity: Optional[Any]) -> FacadeResponse:
        """Forward a new entity to the store. Store failure still answers 200."""
        if entity is None:
            return self._invalid("create()")
        return await self._create(entity)

    async def update(self, entity: Optional[Any]) -> FacadeResponse:
        """Forward changes for an existing entity. Store failure still answers 200."""
        if entity is None:
            return self._invalid("update()")
        if await self.store.update(entity):
            return self._ok(
                schemas.OperationResult(success=True, message=f"{self.resource} #{entity.id} updated successfully")
            )
        self._warn(f"{self.resource} update failed", f"update({entity!r})")
        return self._ok(schemas.OperationResult(success=False, message=f"{self.resource} update failed"))

    async def delete(self, entity_id: int) -> FacadeResponse:
        """Delete by id; unlike create/update, store failure answers 400."""
        if await self.store.delete(entity_id):
            return self._ok(
                schemas.OperationResult(success=True, message=f"{self.resource} #{entity_id} deleted successfully")
            )
        message = f"{self.resource} deletion failed"
        self._warn(message, f"delete({entity_id})")
        return self._bad_request(message)
