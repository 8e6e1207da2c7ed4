"""Folder routes for CRUD operations."""

from typing import Optional

import schemas
from core.dependencies import get_folder_facade
from fastapi import APIRouter, Body, Depends
from services.facades import FolderFacade

from .responses import to_json_response

router = APIRouter()


@router.get("")
async def list_folders(facade: FolderFacade = Depends(get_folder_facade)):
    """List all folders."""
    return to_json_response(await facade.list_all())


@router.get("/{folder_id}")
async def get_folder(folder_id: int, facade: FolderFacade = Depends(get_folder_facade)):
    """Get a specific folder by ID."""
    return to_json_response(await facade.get_by_id(folder_id))


@router.post("")
async def create_folder(
    folder: Optional[schemas.FolderCreate] = Body(None),
    facade: FolderFacade = Depends(get_folder_facade),
):
    """Create a new folder."""
    return to_json_response(await facade.create(folder))


@router.put("")
async def update_folder(
    folder: Optional[schemas.FolderUpdate] = Body(None),
    facade: FolderFacade = Depends(get_folder_facade),
):
    """Update an existing folder (the ID travels in the body)."""
    return to_json_response(await facade.update(folder))


@router.delete("/{folder_id}")
async def delete_folder(folder_id: int, facade: FolderFacade = Depends(get_folder_facade)):
    """Delete a folder. Its decks are kept and detached from it."""
    return to_json_response(await facade.delete(folder_id))
