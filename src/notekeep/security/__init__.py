"""Security utilities."""

from .jwt import (
    create_access_token,
    create_session_token,
    decode_access_token,
    get_token_expiry,
)
from .password import (
    SPECIAL_CHARACTERS,
    hash_password,
    password_policy_violations,
    verify_password,
)

__all__ = [
    "hash_password",
    "verify_password",
    "password_policy_violations",
    "SPECIAL_CHARACTERS",
    "create_access_token",
    "create_session_token",
    "decode_access_token",
    "get_token_expiry",
]
