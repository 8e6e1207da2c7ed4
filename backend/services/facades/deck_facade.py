"""Deck facade, including the folder-scoped list and create operations."""

import logging
from typing import Optional

import schemas
from domain.repositories import DeckStore
from fastapi import status

from .resource_facade import FacadeResponse, ResourceFacade

logger = logging.getLogger("DeckFacade")


class DeckFacade(ResourceFacade):
    resource = "Deck"
    invalid_message = "Invalid Deck data"

    def __init__(self, store: DeckStore, log: Optional[logging.Logger] = None):
        super().__init__(store, log or logger)

    async def list_by_folder(self, folder_id: int) -> FacadeResponse:
        """List the decks in a folder; an absent collection is reported as 400."""
        decks = await self.store.get_decks_by_folder_id(folder_id)
        return self._list_result(decks, f"get_decks_by_folder_id({folder_id})", status.HTTP_400_BAD_REQUEST)

    async def get_by_id(self, deck_id: int) -> FacadeResponse:
        deck = await self.store.get_deck_by_id(deck_id)
        return self._entity_result(deck, f"get_deck_by_id({deck_id})")

    async def create_in_folder(self, folder_id: int, deck: Optional[schemas.DeckCreate]) -> FacadeResponse:
        """Create a deck filed under `folder_id`. The caller's object is not modified."""
        if deck is None:
            return self._invalid(f"create_in_folder({folder_id})")
        return await self._create(deck.model_copy(update={"folder_id": folder_id}))
