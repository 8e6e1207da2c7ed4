"""FastAPI routers for modular endpoint organization."""

from . import decks, flashcards, folders, health

__all__ = [
    "decks",
    "flashcards",
    "folders",
    "health",
]
