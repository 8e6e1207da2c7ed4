"""Deck-related schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from schemas.common import TimestampSerializerMixin


class DeckBase(BaseModel):
    name: str
    description: str = ""
    folder_id: Optional[int] = None


class DeckCreate(DeckBase):
    pass


class DeckUpdate(DeckBase):
    id: int


class Deck(TimestampSerializerMixin, DeckBase):
    id: int
    created_at: datetime

    class Config:
        from_attributes = True


__all__ = [
    "DeckBase",
    "DeckCreate",
    "DeckUpdate",
    "Deck",
]
