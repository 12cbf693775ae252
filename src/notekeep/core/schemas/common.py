"""
Shared response schemas - messages, errors etc
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class MessageResponse(BaseModel):
    """Plain outcome message."""

    message: str = Field(description="Human-readable outcome")


class ErrorResponse(BaseModel):
    """Error body produced by HTTPException and the store error handler."""

    detail: str = Field(description="Human-readable error message")

    model_config = ConfigDict(json_schema_extra={"example": {"detail": "Note not found"}})


class HealthCheckResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(description="Overall health status")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    version: str = Field(description="Application version")
    checks: dict[str, dict[str, Any]] = Field(description="Individual component health checks")
    error: Optional[str] = Field(default=None, description="Set when a check failed hard")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "healthy",
                "timestamp": "2025-09-13T10:30:00Z",
                "version": "1.0.0",
                "checks": {
                    "database": {"status": "healthy", "response_time_ms": 15},
                    "redis": {"status": "healthy", "response_time_ms": 5},
                },
            }
        }
    )
