"""
Database infrastructure package.

Re-exports commonly used database components for convenient imports.
"""

from .connection import (
    Base,
    async_session_maker,
    close_db,
    get_database_type,
    get_db,
    init_db,
    retry_on_db_lock,
    serialized_write,
)
from .models import Deck, Flashcard, Folder

__all__ = [
    # Connection
    "Base",
    "async_session_maker",
    "close_db",
    "get_database_type",
    "get_db",
    "init_db",
    "retry_on_db_lock",
    "serialized_write",
    # Models
    "Deck",
    "Flashcard",
    "Folder",
]
