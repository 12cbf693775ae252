"""Authentication service implementation."""

import logging
from datetime import datetime, timedelta, timezone

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.concurrency import run_in_threadpool

from ...config import get_settings
from ...security import (
    create_session_token,
    get_token_expiry,
    hash_password,
    password_policy_violations,
    verify_password,
)
from ..exceptions import NotFoundError, UnauthorizedError, ValidationError
from ..repositories.token_blacklist_repository import TokenBlacklistRepository
from ..repositories.user_repository import UserRepository
from ..schemas.auth import (
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    TokenResponse,
    UserResponse,
)
from ..schemas.common import MessageResponse
from .interfaces import IAuthService

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repo = UserRepository(session)
        self.blacklist_repo = TokenBlacklistRepository(session)
        self.settings = get_settings()

    async def register_user(self, request: RegisterRequest) -> RegisterResponse:
        """Register new user.

        Checks run in a fixed order: email uniqueness, name uniqueness,
        then password policy. Nothing is written unless all pass.
        """
        if await self.user_repo.is_email_taken(request.email):
            raise ValidationError("This email already exists in our system")

        if await self.user_repo.is_name_taken(request.name):
            raise ValidationError("Username already exists")

        violations = password_policy_violations(request.password)
        if violations:
            raise ValidationError(
                "Password doesn't meet the requirements. It should contain "
                + ", ".join(violations)
                + "."
            )

        # bcrypt is CPU bound, keep it off the event loop
        hashed_password = await run_in_threadpool(hash_password, request.password)

        try:
            user = await self.user_repo.create_user(
                {
                    "name": request.name,
                    "email": request.email,
                    "password_hash": hashed_password,
                }
            )
        except IntegrityError:
            # A concurrent registration took the email or name after the checks
            await self.session.rollback()
            logger.info("Registration lost a uniqueness race")
            raise ValidationError("User with this email or name already exists")
        logger.info(f"Registered user {user.id}")

        return RegisterResponse(
            message="The new user has been registered",
            user=UserResponse.model_validate(user),
        )

    async def authenticate_user(self, request: LoginRequest) -> TokenResponse:
        """Login user and return a session token."""
        user = await self.user_repo.get_by_email(request.email)
        if not user:
            # Unknown email is reported as a bad request on the login route
            raise NotFoundError("User not found", status_code=400)

        if not await run_in_threadpool(verify_password, request.password, user.password_hash):
            logger.info(f"Failed login for user {user.id}")
            raise UnauthorizedError("please check your password")

        access_token = create_session_token(user.name, user.id)
        logger.info(f"Issued session token for user {user.id}")

        return TokenResponse(
            message="Login successful!",
            access_token=access_token,
            token_type="bearer",
            expires_in=self.settings.access_token_expire_minutes * 60,
        )

    async def logout_user(self, access_token: str) -> MessageResponse:
        """Logout by blacklisting the presented token.

        The token is not verified: whatever the client presents is revoked
        until its own expiry, capped at one token lifetime since no session
        token outlives that. Tokens with no readable expiry get the cap.
        """
        now = datetime.now(timezone.utc)
        longest = now + timedelta(minutes=self.settings.access_token_expire_minutes)
        expires_at = min(get_token_expiry(access_token) or longest, longest)

        if expires_at > now:
            await self.blacklist_repo.add_token(access_token, expires_at)
        else:
            logger.debug("Token already expired, nothing to blacklist")

        await self.blacklist_repo.delete_expired_tokens()

        return MessageResponse(message="User has been logged out")
