"""
Store contracts consumed by the resource facades.

Queries return None when the store could not produce a result, commands return
False when the store did not apply the change.
"""

from typing import List, Optional, Protocol

import schemas


class FolderStore(Protocol):
    """Protocol for Folder persistence operations."""

    async def get_all(self) -> Optional[List[schemas.Folder]]: ...

    async def get_folder_by_id(self, folder_id: int) -> Optional[schemas.Folder]: ...

    async def create(self, folder: schemas.FolderCreate) -> bool: ...

    async def update(self, folder: schemas.FolderUpdate) -> bool: ...

    async def delete(self, folder_id: int) -> bool: ...


class DeckStore(Protocol):
    """Protocol for Deck persistence operations."""

    async def get_all(self) -> Optional[List[schemas.Deck]]: ...

    async def get_decks_by_folder_id(self, folder_id: int) -> Optional[List[schemas.Deck]]:
        """
        Get the decks stored in a folder.

        Args:
            folder_id: The parent folder ID

        Returns:
            Decks ordered by ID, or None if the query failed
        """
        ...

    async def get_deck_by_id(self, deck_id: int) -> Optional[schemas.Deck]: ...

    async def create(self, deck: schemas.DeckCreate) -> bool: ...

    async def update(self, deck: schemas.DeckUpdate) -> bool: ...

    async def delete(self, deck_id: int) -> bool: ...


class FlashcardStore(Protocol):
    """Protocol for Flashcard persistence operations."""

    async def get_all(self) -> Optional[List[schemas.Flashcard]]: ...

    async def get_flashcards_by_deck_id(self, deck_id: int) -> Optional[List[schemas.Flashcard]]:
        """
        Get the flashcards belonging to a deck.

        Args:
            deck_id: The owning deck ID

        Returns:
            Flashcards ordered by ID, or None if the query failed
        """
        ...

    async def get_flashcard_by_id(self, flashcard_id: int) -> Optional[schemas.Flashcard]: ...

    async def create(self, flashcard: schemas.FlashcardCreate) -> bool: ...

    async def update(self, flashcard: schemas.FlashcardUpdate) -> bool: ...

    async def delete(self, flashcard_id: int) -> bool: ...
