"""Flashcard facade, including the deck-scoped list and create operations."""

import logging
from typing import Optional

import schemas
from domain.repositories import FlashcardStore
from fastapi import status

from .resource_facade import FacadeResponse, ResourceFacade

logger = logging.getLogger("FlashcardFacade")


class FlashcardFacade(ResourceFacade):
    resource = "Flashcard"
    invalid_message = "Invalid Flashcard data"

    def __init__(self, store: FlashcardStore, log: Optional[logging.Logger] = None):
        super().__init__(store, log or logger)

    async def list_by_deck(self, deck_id: int) -> FacadeResponse:
        """List the flashcards of a deck; an absent collection is reported as 400."""
        flashcards = await self.store.get_flashcards_by_deck_id(deck_id)
        return self._list_result(
            flashcards, f"get_flashcards_by_deck_id({deck_id})", status.HTTP_400_BAD_REQUEST
        )

    async def get_by_id(self, flashcard_id: int) -> FacadeResponse:
        flashcard = await self.store.get_flashcard_by_id(flashcard_id)
        return self._entity_result(flashcard, f"get_flashcard_by_id({flashcard_id})")

    async def create_in_deck(self, deck_id: int, flashcard: Optional[schemas.FlashcardCreate]) -> FacadeResponse:
        """Create a flashcard owned by `deck_id`. The caller's object is not modified."""
        if flashcard is None:
            return self._invalid(f"create_in_deck({deck_id})")
        return await self._create(flashcard.model_copy(update={"deck_id": deck_id}))
