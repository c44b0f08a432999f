"""Redis store for caching market-data snapshots.

Handles:
- Caching with TTL policies
- Connection lifecycle (created once at startup, closed at shutdown)

TTL policies:
- Market data snapshot by symbol: 300 seconds
"""

import logging

import redis.asyncio as redis

# TTL constants (in seconds)
TTL_MARKET_DATA = 300  # 5 minutes

logger = logging.getLogger("uvicorn.error")


def create_redis_client(redis_url: str) -> redis.Redis:
    """Create a Redis client from a connection URL.

    No connection is opened until the first command.
    """
    return redis.from_url(
        redis_url,
        encoding="utf-8",
        decode_responses=True,
        socket_connect_timeout=5,
        socket_timeout=5,
    )


class RedisCacheStore:
    """Cache store backed by a shared Redis client."""

    def __init__(self, client: redis.Redis) -> None:
        self._client = client

    async def get(self, key: str) -> str | None:
        """Get value from cache.

        Args:
            key: Cache key.

        Returns:
            Cached value or None if not found or expired.
        """
        return await self._client.get(key)

    async def set_with_ttl(self, key: str, value: str, ttl_seconds: int) -> None:
        """Set value in cache with TTL, overwriting any previous value.

        Args:
            key: Cache key.
            value: Serialized value to cache.
            ttl_seconds: Time-to-live in seconds.
        """
        await self._client.setex(key, ttl_seconds, value)

    async def ping(self) -> None:
        """Validate connectivity (especially for `rediss://` in production)."""
        await self._client.ping()
        logger.info("Redis connected")

    async def close(self) -> None:
        """Close the connection pool."""
        await self._client.aclose()
