"""
Repository for Flashcard entities.
"""

from typing import List, Optional

import schemas
from infrastructure.database import models
from sqlalchemy.future import select

from .helpers import SqlRepository

_WRITABLE_FIELDS = {"question", "answer", "deck_id"}


class FlashcardRepository(SqlRepository[schemas.Flashcard]):
    """SQLAlchemy implementation of the FlashcardStore contract."""

    model = models.Flashcard
    schema = schemas.Flashcard

    async def get_flashcards_by_deck_id(self, deck_id: int) -> Optional[List[schemas.Flashcard]]:
        query = select(models.Flashcard).where(models.Flashcard.deck_id == deck_id)
        return await self._fetch_all(query, f"get_flashcards_by_deck_id({deck_id})")

    async def get_flashcard_by_id(self, flashcard_id: int) -> Optional[schemas.Flashcard]:
        return await self._fetch_one(flashcard_id, f"get_flashcard_by_id({flashcard_id})")

    async def create(self, flashcard: schemas.FlashcardCreate) -> bool:
        # deck_id is NOT NULL; a card without a deck fails at commit and reports False
        return await self._insert(flashcard.model_dump(include=_WRITABLE_FIELDS))

    async def update(self, flashcard: schemas.FlashcardUpdate) -> bool:
        return await self._update(flashcard.id, flashcard.model_dump(include=_WRITABLE_FIELDS))
