"""Note repository for database operations."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.note import Note


class NoteRepository:
    """Repository for note database operations.

    Ownership is checked by the service layer; these methods only touch
    rows by id or by owner name.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_note(self, note_data: dict) -> Note:
        """Create new note."""
        note = Note(**note_data)
        self.session.add(note)
        await self.session.commit()
        await self.session.refresh(note)
        return note

    async def get_by_id(self, note_id: UUID) -> Optional[Note]:
        """Get note by ID."""
        stmt = select(Note).where(Note.id == note_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_username(self, username: str) -> List[Note]:
        """List every note owned by a user, newest first."""
        stmt = select(Note).where(Note.username == username).order_by(desc(Note.created_at))
        result = await self.session.execute(stmt)
        return list(result.scalars())

    async def update_note(self, note: Note, update_data: dict) -> Note:
        """Apply field updates to a loaded note."""
        for key, value in update_data.items():
            setattr(note, key, value)

        await self.session.commit()
        await self.session.refresh(note)
        return note

    async def delete_note(self, note: Note) -> None:
        """Delete a loaded note."""
        await self.session.delete(note)
        await self.session.commit()
