"""Note service implementation."""

import logging
from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ..exceptions import AuthorizationError, NotFoundError
from ..models.note import Note
from ..repositories.note_repository import NoteRepository
from ..schemas.auth import CurrentUser
from ..schemas.notes import NoteCreate, NoteMessageResponse, NoteResponse, NoteUpdate
from .interfaces import INoteService

logger = logging.getLogger(__name__)


class NoteService(INoteService):
    """Note service implementation.

    A note belongs to the user whose name is stored on it. Every read or
    mutation by id loads the note first, so a missing note is always a 404
    and a note owned by someone else is always a 403.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)

    async def create_note(self, caller: CurrentUser, request: NoteCreate) -> NoteMessageResponse:
        """Create new note owned by the caller."""
        note = await self.note_repo.create_note(
            {
                "title": request.title,
                "body": request.body,
                "username": caller.username,
            }
        )
        logger.info(f"User {caller.user_id} created note {note.id}")

        return NoteMessageResponse(
            message="A new note has been added",
            note=NoteResponse.model_validate(note),
        )

    async def get_note(self, note_id: UUID, caller: CurrentUser) -> NoteResponse:
        """Get note by ID."""
        note = await self._get_owned_note(note_id, caller, "view")
        return NoteResponse.model_validate(note)

    async def list_user_notes(self, caller: CurrentUser) -> List[NoteResponse]:
        """List the caller's notes."""
        notes = await self.note_repo.list_by_username(caller.username)
        return [NoteResponse.model_validate(note) for note in notes]

    async def update_note(
        self, note_id: UUID, caller: CurrentUser, request: NoteUpdate
    ) -> NoteMessageResponse:
        """Update note title and/or body."""
        note = await self._get_owned_note(note_id, caller, "update")

        # Only fields the client actually sent
        update_data = request.model_dump(exclude_unset=True, exclude_none=True)
        note = await self.note_repo.update_note(note, update_data)
        logger.info(f"User {caller.user_id} updated note {note.id}")

        return NoteMessageResponse(
            message="Note has been updated",
            note=NoteResponse.model_validate(note),
        )

    async def delete_note(self, note_id: UUID, caller: CurrentUser) -> NoteMessageResponse:
        """Delete note."""
        note = await self._get_owned_note(note_id, caller, "delete")
        await self.note_repo.delete_note(note)
        logger.info(f"User {caller.user_id} deleted note {note_id}")

        return NoteMessageResponse(message="Note has been deleted")

    async def _get_owned_note(self, note_id: UUID, caller: CurrentUser, action: str) -> Note:
        note = await self.note_repo.get_by_id(note_id)
        if not note:
            raise NotFoundError("Note not found")

        if not note.is_owned_by(caller.username):
            logger.warning(f"User {caller.user_id} tried to {action} note {note_id}")
            raise AuthorizationError(f"You are not authorized to {action} this note")

        return note
