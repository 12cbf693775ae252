"""Repository layer for data access."""

from .note_repository import NoteRepository
from .token_blacklist_repository import TokenBlacklistRepository
from .user_repository import UserRepository

__all__ = [
    "UserRepository",
    "NoteRepository",
    "TokenBlacklistRepository",
]
