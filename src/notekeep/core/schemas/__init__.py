"""
Pydantic schemas for validating and documenting API requests and responses.

This package exposes the Pydantic models used across the application to
define input/output contracts for authentication, notes, and common
responses.
"""

from .auth import (
    CurrentUser,
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    TokenPayload,
    TokenResponse,
    UserResponse,
)
from .common import ErrorResponse, HealthCheckResponse, MessageResponse
from .notes import NoteCreate, NoteMessageResponse, NoteResponse, NoteUpdate

__all__ = [
    # Auth schemas
    "LoginRequest",
    "RegisterRequest",
    "RegisterResponse",
    "CurrentUser",
    "TokenPayload",
    "TokenResponse",
    "UserResponse",
    # Note schemas
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    "NoteMessageResponse",
    # Common schemas
    "MessageResponse",
    "ErrorResponse",
    "HealthCheckResponse",
]
