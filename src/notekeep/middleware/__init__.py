"""Middleware for authentication and other cross-cutting concerns."""

from .auth import JWTBearer, get_bearer_token, get_current_user
from .rate_limit import RateLimiter, enforce_rate_limit, get_rate_limiter

__all__ = [
    "get_current_user",
    "get_bearer_token",
    "JWTBearer",
    "RateLimiter",
    "enforce_rate_limit",
    "get_rate_limiter",
]
