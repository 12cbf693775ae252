"""Notes API endpoints."""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.auth import CurrentUser
from ..core.schemas.common import ErrorResponse
from ..core.schemas.notes import NoteCreate, NoteMessageResponse, NoteResponse, NoteUpdate
from ..core.services import NoteService
from ..database import get_db_session
from ..middleware.rate_limit import enforce_rate_limit

router = APIRouter(
    prefix="/notes",
    tags=["notes"],
    responses={
        401: {"model": ErrorResponse},
        429: {"model": ErrorResponse},
    },
)

_missing_or_foreign = {403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}}


@router.post("/create", response_model=NoteMessageResponse)
async def create_note(
    request: NoteCreate,
    current_user: CurrentUser = Depends(enforce_rate_limit),
    session: AsyncSession = Depends(get_db_session),
):
    """Create a new note."""
    note_service = NoteService(session)
    return await note_service.create_note(current_user, request)


@router.get("/", response_model=List[NoteResponse])
async def list_notes(
    current_user: CurrentUser = Depends(enforce_rate_limit),
    session: AsyncSession = Depends(get_db_session),
):
    """List the caller's notes."""
    note_service = NoteService(session)
    return await note_service.list_user_notes(current_user)


@router.get("/{note_id}", response_model=NoteResponse, responses=_missing_or_foreign)
async def get_note(
    note_id: UUID,
    current_user: CurrentUser = Depends(enforce_rate_limit),
    session: AsyncSession = Depends(get_db_session),
):
    """Get a specific note."""
    note_service = NoteService(session)
    return await note_service.get_note(note_id, current_user)


@router.patch(
    "/update/{note_id}", response_model=NoteMessageResponse, responses=_missing_or_foreign
)
async def update_note(
    note_id: UUID,
    request: NoteUpdate,
    current_user: CurrentUser = Depends(enforce_rate_limit),
    session: AsyncSession = Depends(get_db_session),
):
    """Update a note."""
    note_service = NoteService(session)
    return await note_service.update_note(note_id, current_user, request)


@router.delete(
    "/delete/{note_id}", response_model=NoteMessageResponse, responses=_missing_or_foreign
)
async def delete_note(
    note_id: UUID,
    current_user: CurrentUser = Depends(enforce_rate_limit),
    session: AsyncSession = Depends(get_db_session),
):
    """Delete a note."""
    note_service = NoteService(session)
    return await note_service.delete_note(note_id, current_user)
