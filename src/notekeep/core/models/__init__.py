"""
Database models for NoteKeep application.

This package contains SQLAlchemy ORM models that define the database schema
for the NoteKeep note-taking backend. All models are designed for async
operations through the repository layer.

Models included:
    - User: User account with name/email/password authentication
    - Note: Personal note owned by a user
    - BlacklistedToken: Session tokens revoked on logout
"""

from .base import BaseModel
from .blacklisted_token import BlacklistedToken
from .note import Note
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Note",
    "BlacklistedToken",
]
