"""
CRUD operations module.

This module provides one repository per resource. Each repository wraps an
AsyncSession and implements the matching store protocol from domain.repositories.
"""

from .decks import DeckRepository
from .flashcards import FlashcardRepository
from .folders import FolderRepository
from .helpers import SqlRepository

__all__ = [
    "DeckRepository",
    "FlashcardRepository",
    "FolderRepository",
    "SqlRepository",
]
