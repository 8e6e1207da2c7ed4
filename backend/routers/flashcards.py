"""Flashcard routes for CRUD operations and deck-scoped queries."""

from typing import Optional

import schemas
from core.dependencies import get_flashcard_facade
from fastapi import APIRouter, Body, Depends
from services.facades import FlashcardFacade

from .responses import to_json_response

router = APIRouter()


@router.get("")
async def list_flashcards(facade: FlashcardFacade = Depends(get_flashcard_facade)):
    """List all flashcards."""
    return to_json_response(await facade.list_all())


@router.get("/deck/{deck_id}")
async def list_flashcards_in_deck(deck_id: int, facade: FlashcardFacade = Depends(get_flashcard_facade)):
    """List the flashcards of a deck."""
    return to_json_response(await facade.list_by_deck(deck_id))


@router.get("/{flashcard_id}")
async def get_flashcard(flashcard_id: int, facade: FlashcardFacade = Depends(get_flashcard_facade)):
    """Get a specific flashcard by ID."""
    return to_json_response(await facade.get_by_id(flashcard_id))


@router.post("")
async def create_flashcard(
    flashcard: Optional[schemas.FlashcardCreate] = Body(None),
    facade: FlashcardFacade = Depends(get_flashcard_facade),
):
    """Create a new flashcard (deck_id must be set in the body)."""
    return to_json_response(await facade.create(flashcard))


@router.post("/deck/{deck_id}")
async def create_flashcard_in_deck(
    deck_id: int,
    flashcard: Optional[schemas.FlashcardCreate] = Body(None),
    facade: FlashcardFacade = Depends(get_flashcard_facade),
):
    """Create a new flashcard in a deck."""
    return to_json_response(await facade.create_in_deck(deck_id, flashcard))


@router.put("")
async def update_flashcard(
    flashcard: Optional[schemas.FlashcardUpdate] = Body(None),
    facade: FlashcardFacade = Depends(get_flashcard_facade),
):
    """Update an existing flashcard (the ID travels in the body)."""
    return to_json_response(await facade.update(flashcard))


@router.delete("/{flashcard_id}")
async def delete_flashcard(flashcard_id: int, facade: FlashcardFacade = Depends(get_flashcard_facade)):
    """Delete a flashcard."""
    return to_json_response(await facade.delete(flashcard_id))
