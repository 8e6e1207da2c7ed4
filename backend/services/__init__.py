"""
Services layer.

This package contains the facades that sit between the routers and the
repositories.
"""

from .facades import DeckFacade, FacadeResponse, FlashcardFacade, FolderFacade

__all__ = [
    "DeckFacade",
    "FacadeResponse",
    "FlashcardFacade",
    "FolderFacade",
]
