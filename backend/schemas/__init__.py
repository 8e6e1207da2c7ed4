"""
Pydantic schemas for API request/response models.

This package organizes schemas by resource type:
- folders.py: Folder schemas
- decks.py: Deck schemas
- flashcards.py: Flashcard schemas
- common.py: Shared base classes, mixins and the operation result payload
"""

from schemas.common import OperationResult, TimestampSerializerMixin
from schemas.decks import Deck, DeckBase, DeckCreate, DeckUpdate
from schemas.flashcards import Flashcard, FlashcardBase, FlashcardCreate, FlashcardUpdate
from schemas.folders import Folder, FolderBase, FolderCreate, FolderUpdate

__all__ = [
    # Common
    "OperationResult",
    "TimestampSerializerMixin",
    # Folders
    "FolderBase",
    "FolderCreate",
    "FolderUpdate",
    "Folder",
    # Decks
    "DeckBase",
    "DeckCreate",
    "DeckUpdate",
    "Deck",
    # Flashcards
    "FlashcardBase",
    "FlashcardCreate",
    "FlashcardUpdate",
    "Flashcard",
]
