"""User registration and session endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.schemas.auth import LoginRequest, RegisterRequest, RegisterResponse, TokenResponse
from ..core.schemas.common import ErrorResponse, MessageResponse
from ..core.services import AuthService
from ..database import get_db_session
from ..middleware.auth import get_bearer_token

router = APIRouter(prefix="/users", tags=["users"])


@router.post(
    "/register",
    response_model=RegisterResponse,
    responses={400: {"model": ErrorResponse}},
)
async def register(request: RegisterRequest, session: AsyncSession = Depends(get_db_session)):
    """Register a new user."""
    auth_service = AuthService(session)
    return await auth_service.register_user(request)


@router.post(
    "/login",
    response_model=TokenResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
async def login(request: LoginRequest, session: AsyncSession = Depends(get_db_session)):
    """Login user and get a session token."""
    auth_service = AuthService(session)
    return await auth_service.authenticate_user(request)


@router.get("/logout", response_model=MessageResponse, responses={401: {"model": ErrorResponse}})
async def logout(
    token: str = Depends(get_bearer_token),
    session: AsyncSession = Depends(get_db_session),
):
    """Revoke the presented session token."""
    auth_service = AuthService(session)
    return await auth_service.logout_user(token)
