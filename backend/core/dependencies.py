"""Shared dependencies for FastAPI endpoints."""

from crud import DeckRepository, FlashcardRepository, FolderRepository
from domain.repositories import DeckStore, FlashcardStore, FolderStore
from fastapi import Depends
from infrastructure.database import get_db
from services.facades import DeckFacade, FlashcardFacade, FolderFacade
from sqlalchemy.ext.asyncio import AsyncSession


def get_folder_store(db: AsyncSession = Depends(get_db)) -> FolderStore:
    return FolderRepository(db)


def get_deck_store(db: AsyncSession = Depends(get_db)) -> DeckStore:
    return DeckRepository(db)


def get_flashcard_store(db: AsyncSession = Depends(get_db)) -> FlashcardStore:
    return FlashcardRepository(db)


def get_folder_facade(store: FolderStore = Depends(get_folder_store)) -> FolderFacade:
    """
    Dependency to build a FolderFacade around the request's store.

    Tests override get_folder_store to swap in a mock store.
    """
    return FolderFacade(store)


def get_deck_facade(store: DeckStore = Depends(get_deck_store)) -> DeckFacade:
    """Dependency to build a DeckFacade around the request's store."""
    return DeckFacade(store)


def get_flashcard_facade(store: FlashcardStore = Depends(get_flashcard_store)) -> FlashcardFacade:
    """Dependency to build a FlashcardFacade around the request's store."""
    return FlashcardFacade(store)
