"""JWT token utilities."""

import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from ..config import get_settings

logger = logging.getLogger(__name__)


def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token with JTI so identical payloads never collide."""
    settings = get_settings()
    to_encode = data.copy()

    issued_at = datetime.now(timezone.utc)
    if expires_delta:
        expire = issued_at + expires_delta
    else:
        expire = issued_at + timedelta(minutes=settings.access_token_expire_minutes)

    to_encode.update(
        {"iat": issued_at, "exp": expire, "type": "access", "jti": str(uuid.uuid4())}
    )
    return jwt.encode(
        to_encode, settings.secret_key.get_secret_value(), algorithm=settings.algorithm
    )


def create_session_token(username: str, user_id: uuid.UUID) -> str:
    """Create the session token handed out on login."""
    return create_access_token({"username": username, "userID": str(user_id)})


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Decode and validate access token signature, expiry and type.

    Revocation is checked separately against the blacklist store.
    """
    try:
        settings = get_settings()
        payload = jwt.decode(
            token, settings.secret_key.get_secret_value(), algorithms=[settings.algorithm]
        )
    except JWTError as e:
        logger.debug(f"Rejected access token: {e}")
        return None

    # Verify token type
    if payload.get("type") != "access":
        return None

    return payload


def get_token_expiry(token: str) -> Optional[datetime]:
    """Read the ``exp`` claim without verifying the token."""
    try:
        claims = jwt.get_unverified_claims(token)
    except JWTError:
        return None

    exp = claims.get("exp")
    if isinstance(exp, bool) or not isinstance(exp, (int, float)):
        return None
    # Unverified input: huge values overflow and NaN is not a timestamp
    try:
        return datetime.fromtimestamp(exp, tz=timezone.utc)
    except (OverflowError, ValueError, OSError):
        return None
