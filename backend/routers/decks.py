"""Deck routes for CRUD operations and folder-scoped queries."""

from typing import Optional

import schemas
from core.dependencies import get_deck_facade
from fastapi import APIRouter, Body, Depends
from services.facades import DeckFacade

from .responses import to_json_response

router = APIRouter()


@router.get("")
async def list_decks(facade: DeckFacade = Depends(get_deck_facade)):
    """List all decks."""
    return to_json_response(await facade.list_all())


@router.get("/folder/{folder_id}")
async def list_decks_in_folder(folder_id: int, facade: DeckFacade = Depends(get_deck_facade)):
    """List the decks filed under a folder."""
    return to_json_response(await facade.list_by_folder(folder_id))


@router.get("/{deck_id}")
async def get_deck(deck_id: int, facade: DeckFacade = Depends(get_deck_facade)):
    """Get a specific deck by ID."""
    return to_json_response(await facade.get_by_id(deck_id))


@router.post("")
async def create_deck(
    deck: Optional[schemas.DeckCreate] = Body(None),
    facade: DeckFacade = Depends(get_deck_facade),
):
    """Create a new deck."""
    return to_json_response(await facade.create(deck))


@router.post("/folder/{folder_id}")
async def create_deck_in_folder(
    folder_id: int,
    deck: Optional[schemas.DeckCreate] = Body(None),
    facade: DeckFacade = Depends(get_deck_facade),
):
    """Create a new deck inside a folder."""
    return to_json_response(await facade.create_in_folder(folder_id, deck))


@router.put("")
async def update_deck(
    deck: Optional[schemas.DeckUpdate] = Body(None),
    facade: DeckFacade = Depends(get_deck_facade),
):
    """Update an existing deck (the ID travels in the body)."""
    return to_json_response(await facade.update(deck))


@router.delete("/{deck_id}")
async def delete_deck(deck_id: int, facade: DeckFacade = Depends(get_deck_facade)):
    """Delete a deck together with its flashcards."""
    return to_json_response(await facade.delete(deck_id))
