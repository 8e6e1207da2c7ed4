"""
Repository for Deck entities.
"""

from typing import List, Optional

import schemas
from infrastructure.database import models
from sqlalchemy.future import select

from .helpers import SqlRepository

_WRITABLE_FIELDS = {"name", "description", "folder_id"}


class DeckRepository(SqlRepository[schemas.Deck]):
    """SQLAlchemy implementation of the DeckStore contract."""

    model = models.Deck
    schema = schemas.Deck

    async def get_decks_by_folder_id(self, folder_id: int) -> Optional[List[schemas.Deck]]:
        """Get the decks filed under a folder (an unknown folder yields an empty list)."""
        query = select(models.Deck).where(models.Deck.folder_id == folder_id)
        return await self._fetch_all(query, f"get_decks_by_folder_id({folder_id})")

    async def get_deck_by_id(self, deck_id: int) -> Optional[schemas.Deck]:
        return await self._fetch_one(deck_id, f"get_deck_by_id({deck_id})")

    async def create(self, deck: schemas.DeckCreate) -> bool:
        return await self._insert(deck.model_dump(include=_WRITABLE_FIELDS))

    async def update(self, deck: schemas.DeckUpdate) -> bool:
        return await self._update(deck.id, deck.model_dump(include=_WRITABLE_FIELDS))
