"""
HTTP-aware error taxonomy for NoteKeep.

Each error is an ``HTTPException`` so FastAPI renders it without extra
handlers; services raise them directly.
"""

from typing import Optional

from fastapi import HTTPException, status


class NoteKeepError(HTTPException):
    """Base error for NoteKeep"""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(
        self,
        detail: str,
        status_code: Optional[int] = None,
        headers: Optional[dict[str, str]] = None,
    ):
        super().__init__(
            status_code=status_code or self.status_code, detail=detail, headers=headers
        )


class ValidationError(NoteKeepError):
    """Duplicate identity or password policy violation"""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(NoteKeepError):
    """Missing user or note"""

    status_code = status.HTTP_404_NOT_FOUND


class UnauthorizedError(NoteKeepError):
    """Missing, invalid, expired or revoked credentials"""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, detail: str = "Not authenticated"):
        super().__init__(detail, headers={"WWW-Authenticate": "Bearer"})


class AuthorizationError(NoteKeepError):
    """Caller does not own the resource"""

    status_code = status.HTTP_403_FORBIDDEN


class TooManyRequestsError(NoteKeepError):
    """Rate limit exceeded"""

    status_code = status.HTTP_429_TOO_MANY_REQUESTS

    def __init__(self, detail: str = "Too many requests", retry_after: Optional[int] = None):
        self.retry_after = retry_after
        headers = {"Retry-After": str(retry_after)} if retry_after is not None else None
        super().__init__(detail, headers=headers)
