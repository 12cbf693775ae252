"""
Authentication and authorization schemas.

These schemas define the API contracts for user registration, login,
logout and session tokens.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class RegisterRequest(BaseModel):
    """User registration request schema.

    Password strength is checked by the service so policy failures map to
    400 rather than a schema error.
    """

    name: str = Field(min_length=1, max_length=50, description="Unique display name")
    email: EmailStr = Field(description="Unique email address")
    password: str = Field(alias="pass", max_length=128, description="User password")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "name": "Alice",
                "email": "alice@example.com",
                "pass": "Abcd123!",
            }
        },
    )


class LoginRequest(BaseModel):
    """User login request schema."""

    email: EmailStr = Field(description="Registered email address")
    password: str = Field(alias="pass", max_length=128, description="User password")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"example": {"email": "alice@example.com", "pass": "Abcd123!"}},
    )


class UserResponse(BaseModel):
    """User information response schema (never includes the password hash)."""

    id: uuid.UUID = Field(description="User unique identifier")
    name: str = Field(description="Display name")
    email: str = Field(description="Email address")
    created_at: datetime = Field(description="Account creation timestamp")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "name": "Alice",
                "email": "alice@example.com",
                "created_at": "2025-09-13T10:30:00Z",
            }
        },
    )


class RegisterResponse(BaseModel):
    """Registration result."""

    message: str = Field(description="Outcome message")
    user: UserResponse = Field(description="The registered user")


class TokenResponse(BaseModel):
    """JWT token response schema."""

    message: str = Field(default="Login successful!", description="Outcome message")
    access_token: str = Field(description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(description="Token expiration time in seconds")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "message": "Login successful!",
                "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "bearer",
                "expires_in": 3600,
            }
        }
    )


class TokenPayload(BaseModel):
    """Claims carried by a session token."""

    username: str
    user_id: uuid.UUID = Field(alias="userID")
    exp: int
    iat: Optional[int] = None
    jti: Optional[str] = None


class CurrentUser(BaseModel):
    """Identity of the caller, taken from a verified session token."""

    user_id: uuid.UUID
    username: str
    token: str = Field(repr=False)
