"""Redis client for rate limiting and health checks."""

import logging
from typing import Optional, Tuple

import redis.asyncio as redis

from ..config import get_settings

logger = logging.getLogger(__name__)


class RedisClient:
    """Thin async Redis wrapper that degrades to no-ops when disconnected."""

    def __init__(self):
        self.settings = get_settings()
        self.redis: Optional[redis.Redis] = None

    @property
    def is_connected(self) -> bool:
        return self.redis is not None

    async def connect(self) -> None:
        """Connect to Redis."""
        try:
            self.redis = redis.from_url(
                self.settings.redis_url,
                max_connections=self.settings.redis_max_connections,
                decode_responses=True,
            )
            # Test connection
            await self.redis.ping()
            logger.info("Connected to Redis successfully")
        except Exception as e:
            logger.error(f"Failed to connect to Redis: {e}")
            self.redis = None
            raise

    async def disconnect(self) -> None:
        """Disconnect from Redis."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None
            logger.info("Disconnected from Redis")

    async def ping(self) -> bool:
        """Round-trip to the server."""
        if not self.redis:
            return False
        try:
            return bool(await self.redis.ping())
        except Exception as e:
            logger.error(f"Redis PING error: {e}")
            return False

    # Rate limiting
    async def increment_rate_limit(self, key: str, expire: int = 60) -> Optional[Tuple[int, int]]:
        """Increment a fixed-window counter.

        Returns ``(count, seconds_left)`` or ``None`` when Redis is unavailable.
        The window starts with the first hit; later hits do not extend it.
        """
        if not self.redis:
            return None
        try:
            # MULTI/EXEC keeps create-with-TTL and increment atomic
            async with self.redis.pipeline(transaction=True) as pipe:
                pipe.set(key, 0, ex=expire, nx=True)
                pipe.incr(key)
                pipe.ttl(key)
                _, count, ttl = await pipe.execute()
            return int(count), max(int(ttl), 0)
        except Exception as e:
            logger.error(f"Rate limit error for key {key}: {e}")
            return None


# Singleton instance
_redis_client: Optional[RedisClient] = None


def get_redis_client() -> RedisClient:
    """Get Redis client singleton."""
    global _redis_client
    if _redis_client is None:
        _redis_client = RedisClient()
    return _redis_client
