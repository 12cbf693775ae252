"""
Service interfaces for NoteKeep application.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List
from uuid import UUID

from ..schemas.auth import (
    CurrentUser,
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    TokenResponse,
)
from ..schemas.common import HealthCheckResponse, MessageResponse
from ..schemas.notes import NoteCreate, NoteMessageResponse, NoteResponse, NoteUpdate


class IAuthService(ABC):
    """Auth service for user management."""

    @abstractmethod
    async def register_user(self, request: RegisterRequest) -> RegisterResponse:
        """Register new user."""
        pass

    @abstractmethod
    async def authenticate_user(self, request: LoginRequest) -> TokenResponse:
        """Login user and return a session token."""
        pass

    @abstractmethod
    async def logout_user(self, access_token: str) -> MessageResponse:
        """Revoke a session token."""
        pass


class INoteService(ABC):
    """Note service for ownership-checked CRUD operations."""

    @abstractmethod
    async def create_note(self, caller: CurrentUser, request: NoteCreate) -> NoteMessageResponse:
        """Create new note."""
        pass

    @abstractmethod
    async def get_note(self, note_id: UUID, caller: CurrentUser) -> NoteResponse:
        """Get note by ID."""
        pass

    @abstractmethod
    async def list_user_notes(self, caller: CurrentUser) -> List[NoteResponse]:
        """List the caller's notes."""
        pass

    @abstractmethod
    async def update_note(
        self, note_id: UUID, caller: CurrentUser, request: NoteUpdate
    ) -> NoteMessageResponse:
        """Update existing note."""
        pass

    @abstractmethod
    async def delete_note(self, note_id: UUID, caller: CurrentUser) -> NoteMessageResponse:
        """Delete note."""
        pass


class IHealthService(ABC):
    """Health check service."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Get app health status."""
        pass

    @abstractmethod
    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connection."""
        pass

    @abstractmethod
    async def check_redis_health(self) -> Dict[str, Any]:
        """Check Redis connection."""
        pass
