"""
Facades mapping store outcomes to HTTP responses.

Each facade validates presence, calls one store method and returns a
FacadeResponse (status code + body) for the router to send.
"""

from .deck_facade import DeckFacade
from .flashcard_facade import FlashcardFacade
from .folder_facade import FolderFacade
from .resource_facade import FacadeResponse, ResourceFacade

__all__ = ["DeckFacade", "FacadeResponse", "FlashcardFacade", "FolderFacade", "ResourceFacade"]
