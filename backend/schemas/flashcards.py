"""Flashcard-related schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from schemas.common import TimestampSerializerMixin


class FlashcardBase(BaseModel):
    question: str
    answer: str


class FlashcardCreate(FlashcardBase):
    # Optional on input: create_in_deck fills it from the route
    deck_id: Optional[int] = None


class FlashcardUpdate(FlashcardBase):
    id: int
    deck_id: int


class Flashcard(TimestampSerializerMixin, FlashcardBase):
    id: int
    deck_id: int
    created_at: datetime

    class Config:
        from_attributes = True


__all__ = [
    "FlashcardBase",
    "FlashcardCreate",
    "FlashcardUpdate",
    "Flashcard",
]
