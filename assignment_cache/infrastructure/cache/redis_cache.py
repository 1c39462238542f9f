"""Redis-based cache backend.

Provides the primitive JSON get/set, delete and key scan operations used by
CacheRepository. Errors from Redis and from JSON (de)serialization are
raised as-is; mapping them into cache errors is the adapter's job.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import redis.asyncio as redis

from assignment_cache.core.config import Settings, get_settings
from assignment_cache.domain.exceptions import ConfigurationException

logger = logging.getLogger(__name__)


def create_redis_client(settings: Settings | None = None) -> redis.Redis:
    """Build an async Redis client from settings (no I/O until first command).

    Args:
        settings: Settings to read connection options from; defaults to get_settings().

    Returns:
        Redis client decoding responses to str.
    """
    settings = settings or get_settings()
    return redis.Redis(
        host=settings.redis_host,
        port=settings.redis_port,
        db=settings.redis_db,
        username=settings.redis_username,
        password=settings.redis_password.get_secret_value() if settings.redis_password else None,
        ssl=settings.redis_secure,
        max_connections=settings.redis_max_connections,
        socket_connect_timeout=settings.redis_socket_connect_timeout,
        socket_timeout=settings.redis_socket_timeout,
        socket_keepalive=True,
        decode_responses=True,
    )


class RedisCacheBackend:
    """Async Redis cache backend with optional expiry.

    Values are stored as JSON strings. Expiry (cache_ttl_seconds) is the
    backend's policy; None keeps entries until they are invalidated.
    Call connect() at startup and disconnect() at shutdown when the client
    is not injected.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize cache backend.

        Args:
            redis_client: Optional Redis client for testing or DI.
            settings: Optional settings; defaults to get_settings().
        """
        self.redis = redis_client
        self.settings = settings or get_settings()
        self.ttl = self.settings.cache_ttl_seconds

    async def connect(self) -> None:
        """Create the client if needed and verify the connection.

        Raises:
            ConfigurationException: If Redis cannot be reached.
        """
        if self.redis is None:
            self.redis = create_redis_client(self.settings)
        try:
            await self.redis.ping()
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning(
                "Redis connection failed: %s:%s (%s)",
                self.settings.redis_host,
                self.settings.redis_port,
                e,
            )
            raise ConfigurationException(
                f"Cannot connect to Redis at {self.settings.redis_host}:{self.settings.redis_port}",
                option="client",
            ) from e
        logger.info(
            "Redis cache connected: %s:%s",
            self.settings.redis_host,
            self.settings.redis_port,
        )

    async def disconnect(self) -> None:
        """Close Redis connection. Call on shutdown."""
        if self.redis is not None:
            await self.redis.aclose()
            self.redis = None
            logger.info("Redis cache disconnected")

    async def ping(self) -> bool:
        """Return True when Redis answers PING."""
        return bool(await self._client().ping())

    def _client(self) -> redis.Redis:
        if self.redis is None:
            raise redis.ConnectionError("Redis cache backend is not connected")
        return self.redis

    async def get_json(self, key: str) -> Any | None:
        """Return cached value (JSON-deserialized) or None on miss.

        Args:
            key: Cache key (use infrastructure.cache.keys builders).

        Raises:
            redis.RedisError: On transport failure.
            ValueError: If the stored value is not valid JSON.
        """
        value = await self._client().get(key)
        if value is None:
            return None
        return json.loads(value)

    async def set_json(self, key: str, value: Any) -> None:
        """Store value as JSON, with the configured expiry if any.

        Raises:
            redis.RedisError: On transport failure.
            TypeError: If value is not JSON-serializable.
        """
        serialized = json.dumps(value)
        if self.ttl:
            await self._client().setex(key, self.ttl, serialized)
        else:
            await self._client().set(key, serialized)

    async def delete(self, key: str) -> None:
        """Remove key from cache (absent keys are ignored by Redis)."""
        await self._client().delete(key)

    async def keys_matching(self, pattern: str) -> list[str]:
        """Return keys matching pattern using SCAN (non-blocking, unlike KEYS).

        Args:
            pattern: Redis SCAN match pattern (e.g. Assignment:GetByUser:*).
        """
        keys = [key async for key in self._client().scan_iter(match=pattern)]
        # SCAN may return a key more than once
        return list(dict.fromkeys(keys))
