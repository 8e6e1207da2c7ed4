"""
Domain layer.

- repositories.py: store protocols the facades depend on
- exceptions.py: application exceptions
"""

from .exceptions import ConfigurationError
from .repositories import DeckStore, FlashcardStore, FolderStore

__all__ = [
    "ConfigurationError",
    "DeckStore",
    "FlashcardStore",
    "FolderStore",
]
