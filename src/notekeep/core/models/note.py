# Note model for user content
from sqlalchemy import CheckConstraint, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel


class Note(BaseModel):
    """Personal text note owned by a single user."""

    __tablename__ = "notes"

    title: Mapped[str] = mapped_column(String(200), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)

    # owner reference by user name (names are unique and immutable)
    username: Mapped[str] = mapped_column(String(50), nullable=False)

    __table_args__ = (
        Index("idx_notes_username", "username"),
        Index("idx_notes_username_created", "username", "created_at"),
        # Enforce title max length (SQLite compatible)
        CheckConstraint("length(title) <= 200", name="ck_notes_title_len"),
    )

    def __repr__(self) -> str:
        # Truncate long titles to keep logs readable
        truncated = self.title if len(self.title) <= 30 else (self.title[:30] + "...")
        return f"<Note(title='{truncated}', username='{self.username}')>"

    def is_owned_by(self, username: str) -> bool:
        """
        Check if this note is owned by the given user name.

        Args:
            username: name of the user to check ownership against

        Returns:
            bool: True if the user owns this note, False otherwise
        """
        return self.username == username
