"""Cache adapter: typed get/set/delete/delete_pattern over a cache backend.

Every operation runs in its own span and maps backend failures into
CacheReadError, CacheWriteError or CacheDeleteError (chained to the
original error). A miss is a normal result (None), never an error.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from opentelemetry import trace

from assignment_cache.domain.exceptions import (
    CacheDeleteError,
    CacheReadError,
    CacheWriteError,
)
from assignment_cache.infrastructure.cache.cache_protocol import CacheBackendProtocol
from assignment_cache.shared.telemetry.telemetry import get_tracer
from assignment_cache.shared.telemetry.tracing import TracedOperation

T = TypeVar("T")

_SPAN_PREFIX = "cache.CacheRepository"


class CacheRepository:
    """Typed wrapper over a CacheBackendProtocol implementation.

    Holds no mutable state after construction; safe to share between
    concurrent callers.
    """

    def __init__(
        self,
        client: CacheBackendProtocol,
        tracer: trace.Tracer | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._client = client
        self._tracer = tracer or get_tracer(__name__)
        self._logger = logger or logging.getLogger(__name__)

    async def get(
        self, key: str, decode: Callable[[Any], T] | None = None
    ) -> T | Any | None:
        """Return the cached value for key, or None on miss.

        Args:
            key: Cache key.
            decode: Optional callable turning the stored JSON value into a typed value.

        Raises:
            CacheReadError: On transport or deserialization failure.
        """
        async with TracedOperation(
            f"{_SPAN_PREFIX}/get", {"cache.key": key}, self._tracer
        ) as op:
            try:
                raw = await self._client.get_json(key)
            except Exception as e:
                self._logger.warning("Cache get error for key %s: %s", key, e)
                raise CacheReadError(key, str(e)) from e
            if raw is None:
                op.set_attributes(cache_hit=False)
                self._logger.debug("Cache MISS: %s", key)
                return None
            op.set_attributes(cache_hit=True)
            self._logger.debug("Cache HIT: %s", key)
            if decode is None:
                return raw
            try:
                return decode(raw)
            except Exception as e:
                self._logger.warning("Cache decode error for key %s: %s", key, e)
                raise CacheReadError(key, str(e)) from e

    async def set(
        self, key: str, value: T, encode: Callable[[T], Any] | None = None
    ) -> None:
        """Serialize and store value under key.

        Args:
            key: Cache key.
            value: Value to store.
            encode: Optional callable turning value into a JSON-compatible form.

        Raises:
            CacheWriteError: On transport or serialization failure.
        """
        async with TracedOperation(f"{_SPAN_PREFIX}/set", {"cache.key": key}, self._tracer):
            try:
                payload = encode(value) if encode is not None else value
                await self._client.set_json(key, payload)
            except Exception as e:
                self._logger.warning("Cache set error for key %s: %s", key, e)
                raise CacheWriteError(key, str(e)) from e
            self._logger.debug("Cache SET: %s", key)

    async def delete(self, key: str) -> None:
        """Remove key; an absent key is success.

        Raises:
            CacheDeleteError: On transport failure.
        """
        async with TracedOperation(
            f"{_SPAN_PREFIX}/delete", {"cache.key": key}, self._tracer
        ):
            try:
                await self._client.delete(key)
            except Exception as e:
                self._logger.warning("Cache delete error for key %s: %s", key, e)
                raise CacheDeleteError(key, str(e)) from e
            self._logger.debug("Cache DELETE: %s", key)

    async def delete_pattern(self, pattern: str) -> int:
        """Delete every key matching a glob pattern, one key at a time.

        Stops at the first failing key; keys after it are not attempted.

        Args:
            pattern: Glob pattern (e.g. Assignment:GetByUser:*).

        Returns:
            Number of keys deleted.

        Raises:
            CacheDeleteError: If the key scan or any single delete fails.
        """
        async with TracedOperation(
            f"{_SPAN_PREFIX}/delete_pattern", {"cache.pattern": pattern}, self._tracer
        ) as op:
            try:
                keys = await self._client.keys_matching(pattern)
            except Exception as e:
                self._logger.warning("Cache scan error for pattern %s: %s", pattern, e)
                raise CacheDeleteError(pattern, str(e)) from e
            for key in keys:
                try:
                    await self._client.delete(key)
                except Exception as e:
                    self._logger.warning(
                        "Cache delete error for key %s (pattern %s): %s", key, pattern, e
                    )
                    raise CacheDeleteError(key, str(e)) from e
            op.set_attributes(cache_keys_deleted=len(keys))
            if keys:
                self._logger.info("Cache INVALIDATE: %s (%s keys)", pattern, len(keys))
            return len(keys)
