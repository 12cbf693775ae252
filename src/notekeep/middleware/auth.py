"""Authentication middleware."""

import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.exceptions import UnauthorizedError
from ..core.repositories.token_blacklist_repository import TokenBlacklistRepository
from ..core.schemas.auth import CurrentUser, TokenPayload
from ..database import get_db_session
from ..security import decode_access_token

logger = logging.getLogger(__name__)


class JWTBearer(HTTPBearer):
    """JWT Bearer token authentication.

    Resolves to the caller's identity. Missing, malformed, expired and
    revoked tokens all answer 401 with a ``WWW-Authenticate`` challenge.
    """

    def __init__(self):
        # Errors are raised here, not by HTTPBearer, so they carry our status
        super().__init__(auto_error=False)

    async def __call__(
        self, request: Request, session: AsyncSession = Depends(get_db_session)
    ) -> CurrentUser:
        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)
        if not credentials:
            raise UnauthorizedError("Not authenticated")

        token = credentials.credentials
        payload = decode_access_token(token)
        if not payload:
            raise UnauthorizedError("Invalid token or expired token")

        try:
            claims = TokenPayload.model_validate(payload)
        except PydanticValidationError:
            logger.warning("Signed token is missing identity claims")
            raise UnauthorizedError("Invalid token or expired token")

        if await TokenBlacklistRepository(session).is_blacklisted(token):
            raise UnauthorizedError("Token has been revoked")

        return CurrentUser(user_id=claims.user_id, username=claims.username, token=token)


jwt_bearer = JWTBearer()
bearer_scheme = HTTPBearer(auto_error=False)


# Dependency for getting the current user from JWT
async def get_current_user(user: CurrentUser = Depends(jwt_bearer)) -> CurrentUser:
    """Get current authenticated user."""
    return user


async def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    """Raw bearer token from the request, without verifying it."""
    if not credentials or not credentials.credentials:
        raise UnauthorizedError("Not authenticated")
    return credentials.credentials
