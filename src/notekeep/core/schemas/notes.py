"""
Note management schemas.

The owner of a note always comes from the authenticated token, so none of
the request schemas accept a ``username``; unknown fields are ignored.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class NoteCreate(BaseModel):
    """Note creation request schema."""

    title: str = Field(min_length=1, max_length=200, description="Note title")
    body: str = Field(min_length=1, description="Note body")

    @field_validator("title", "body")
    @classmethod
    def not_blank(cls, v):
        """Reject whitespace-only values."""
        if len(v.strip()) == 0:
            raise ValueError("Field cannot be empty")
        return v

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={"example": {"title": "Groceries", "body": "Milk, eggs, coffee"}},
    )


class NoteUpdate(BaseModel):
    """Note update request schema."""

    title: Optional[str] = Field(
        default=None, min_length=1, max_length=200, description="Note title"
    )
    body: Optional[str] = Field(default=None, min_length=1, description="Note body")

    @field_validator("title", "body")
    @classmethod
    def not_blank(cls, v):
        """Reject whitespace-only values."""
        if v is not None and len(v.strip()) == 0:
            raise ValueError("Field cannot be empty")
        return v

    @model_validator(mode="after")
    def has_changes(self):
        """Require at least one field to update."""
        if self.title is None and self.body is None:
            raise ValueError("Provide title and/or body to update")
        return self

    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={"example": {"title": "Groceries (weekend)"}},
    )


class NoteResponse(BaseModel):
    """Note response schema."""

    id: uuid.UUID = Field(description="Note unique identifier")
    title: str = Field(description="Note title")
    body: str = Field(description="Note body")
    username: str = Field(description="Owner name")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "title": "Groceries",
                "body": "Milk, eggs, coffee",
                "username": "Alice",
                "created_at": "2025-09-13T10:30:00Z",
                "updated_at": "2025-09-13T11:00:00Z",
            }
        },
    )


class NoteMessageResponse(BaseModel):
    """Outcome of a note mutation, with the affected note when it still exists."""

    message: str = Field(description="Outcome message")
    note: Optional[NoteResponse] = Field(default=None, description="Affected note")
