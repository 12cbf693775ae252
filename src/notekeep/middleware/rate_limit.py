"""Per-caller request rate limiting."""

import asyncio
import logging
import math
import time
from typing import Dict, Optional, Tuple

from fastapi import Depends

from ..config import get_settings
from ..core.exceptions import TooManyRequestsError
from ..core.redis_client import RedisClient, get_redis_client
from ..core.schemas.auth import CurrentUser
from .auth import get_current_user

logger = logging.getLogger(__name__)


class RateLimiter:
    """Fixed-window request counter.

    Counters live in Redis when it is connected, so every worker shares
    them. Without Redis they fall back to this process.
    """

    def __init__(
        self,
        limit: int,
        window_seconds: int,
        backend: str = "redis",
        redis_client: Optional[RedisClient] = None,
    ):
        self.limit = limit
        self.window_seconds = window_seconds
        self.backend = backend
        self.redis_client = redis_client
        # key -> (window start, hits)
        self._windows: Dict[str, Tuple[float, int]] = {}
        self._lock = asyncio.Lock()
        self._clock = time.monotonic

    async def hit(self, key: str) -> Tuple[bool, int]:
        """Count one request for ``key``.

        Returns whether the request is allowed and the seconds left in the
        current window.
        """
        result = None
        if self.backend == "redis" and self.redis_client and self.redis_client.is_connected:
            result = await self.redis_client.increment_rate_limit(key, self.window_seconds)

        if result is None:
            result = await self._hit_memory(key)

        count, retry_after = result
        return count <= self.limit, max(retry_after, 1)

    async def _hit_memory(self, key: str) -> Tuple[int, int]:
        now = self._clock()
        async with self._lock:
            started, count = self._windows.get(key, (now, 0))
            if now - started >= self.window_seconds:
                started, count = now, 0
            count += 1
            self._windows[key] = (started, count)

            # Drop windows that have run out so the map stays bounded
            if len(self._windows) > 10_000:
                self._windows = {
                    k: v for k, v in self._windows.items() if now - v[0] < self.window_seconds
                }

        return count, math.ceil(self.window_seconds - (now - started))


# Singleton instance
_rate_limiter: Optional[RateLimiter] = None


def get_rate_limiter() -> RateLimiter:
    """Get rate limiter singleton."""
    global _rate_limiter
    if _rate_limiter is None:
        settings = get_settings()
        _rate_limiter = RateLimiter(
            limit=settings.rate_limit_requests,
            window_seconds=settings.rate_limit_window_seconds,
            backend=settings.rate_limit_backend,
            redis_client=get_redis_client(),
        )
    return _rate_limiter


async def enforce_rate_limit(
    current_user: CurrentUser = Depends(get_current_user),
    limiter: RateLimiter = Depends(get_rate_limiter),
) -> CurrentUser:
    """Reject the request with 429 once the caller exhausts the window."""
    allowed, retry_after = await limiter.hit(f"ratelimit:{current_user.user_id}")
    if not allowed:
        logger.warning(f"Rate limit exceeded for user {current_user.user_id}")
        raise TooManyRequestsError("Too many requests", retry_after=retry_after)
    return current_user
