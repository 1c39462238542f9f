"""Assignment repository with read-through caching and write invalidation.

Reads consult the cache first and populate it from the wrapped store on a
miss. Mutations invalidate every entry that could reflect the change, then
delegate to the store. Returns domain entities.
"""

from __future__ import annotations

import logging
from typing import Any

import redis.asyncio as redis
from opentelemetry import trace
from pydantic import ValidationError

from assignment_cache.application.interfaces.repositories import IAssignmentRepository
from assignment_cache.core.config import Settings
from assignment_cache.core.constants import METHOD_GET_BY_RESOURCE, METHOD_GET_BY_USER
from assignment_cache.domain.entities.assignment import Assignment
from assignment_cache.domain.exceptions import ConfigurationException
from assignment_cache.domain.value_objects.core import ID
from assignment_cache.infrastructure.cache.cache_protocol import CacheBackendProtocol
from assignment_cache.infrastructure.cache.cache_repository import CacheRepository
from assignment_cache.infrastructure.cache.invalidation import AssignmentCacheInvalidator
from assignment_cache.infrastructure.cache.keys import assignment_key, assignment_list_key
from assignment_cache.infrastructure.cache.redis_cache import RedisCacheBackend
from assignment_cache.shared.telemetry.telemetry import get_tracer
from assignment_cache.shared.telemetry.tracing import TracedOperation

_SPAN_PREFIX = "repository.CachedAssignmentRepository"


def _assignment_to_cached(assignment: Assignment) -> dict[str, Any]:
    return assignment.to_dict()


def _assignments_to_cached(assignments: list[Assignment]) -> list[dict[str, Any]]:
    return [a.to_dict() for a in assignments]


def _assignments_from_cached(cached: Any) -> list[Assignment]:
    """Build the ordered assignment list from its cached form."""
    if not isinstance(cached, list):
        raise TypeError(f"Expected a cached list, got {type(cached).__name__}")
    return [Assignment.from_dict(item) for item in cached]


class CachedAssignmentRepository:
    """Caching decorator over an IAssignmentRepository.

    Stateless after construction; the cache backend and the wrapped store
    are shared between concurrent callers and synchronize themselves.
    """

    def __init__(
        self,
        assignment_repo: IAssignmentRepository,
        cache: CacheRepository,
        tracer: trace.Tracer | None = None,
    ) -> None:
        self._repo = assignment_repo
        self._cache = cache
        self._invalidator = AssignmentCacheInvalidator(cache)
        self._tracer = tracer or get_tracer(__name__)

    async def create(self, assignment: Assignment) -> None:
        """Invalidate lists of the resource and user and the sibling caches, then create.

        Raises:
            CacheDeleteError: If an invalidation step fails (store not called).
            UnexpectedCachedResourceError: If the resource kind has no cross-cache plan.
        """
        async with TracedOperation(
            f"{_SPAN_PREFIX}/create",
            {"assignment.user": str(assignment.user), "assignment.resource": str(assignment.resource)},
            self._tracer,
        ):
            await self._invalidator.clear_assignments_by_resource(assignment.resource)
            await self._invalidator.clear_assignments_by_user(assignment.user)
            await self._invalidator.clear_cross_caches(assignment)
            await self._repo.create(assignment)

    async def get(self, assignment_id: ID) -> Assignment | None:
        """Get assignment by ID, from cache if available.

        Store errors (e.g. ResourceNotFoundException) propagate unchanged; a
        store returning None is passed through without caching anything.

        Raises:
            CacheReadError: If the cache cannot be read (store not consulted).
            CacheWriteError: If the fetched assignment cannot be cached.
        """
        key = assignment_key(assignment_id)
        async with TracedOperation(f"{_SPAN_PREFIX}/get", {"cache.key": key}, self._tracer):
            cached = await self._cache.get(key, Assignment.from_dict)
            if cached is not None:
                return cached
            assignment = await self._repo.get(assignment_id)
            if assignment is None:
                return None
            await self._cache.set(key, assignment, _assignment_to_cached)
            return assignment

    async def get_by_user(
        self, user_id: ID, offset: int = 0, limit: int = 100
    ) -> list[Assignment]:
        """Get a page of a user's assignments, from cache if available."""
        key = assignment_list_key(METHOD_GET_BY_USER, user_id, offset, limit)
        async with TracedOperation(f"{_SPAN_PREFIX}/get_by_user", {"cache.key": key}, self._tracer):
            cached = await self._cache.get(key, _assignments_from_cached)
            if cached is not None:
                return cached
            assignments = list(await self._repo.get_by_user(user_id, offset, limit))
            await self._cache.set(key, assignments, _assignments_to_cached)
            return assignments

    async def get_by_resource(
        self, resource_id: ID, offset: int = 0, limit: int = 100
    ) -> list[Assignment]:
        """Get a page of a resource's assignments, from cache if available."""
        key = assignment_list_key(METHOD_GET_BY_RESOURCE, resource_id, offset, limit)
        async with TracedOperation(
            f"{_SPAN_PREFIX}/get_by_resource", {"cache.key": key}, self._tracer
        ):
            cached = await self._cache.get(key, _assignments_from_cached)
            if cached is not None:
                return cached
            assignments = list(await self._repo.get_by_resource(resource_id, offset, limit))
            await self._cache.set(key, assignments, _assignments_to_cached)
            return assignments

    async def delete(self, assignment_id: ID) -> None:
        """Invalidate the entry, every assignment list and both sibling caches, then delete.

        The owning user and resource are unknown here, so every list is purged.
        """
        async with TracedOperation(
            f"{_SPAN_PREFIX}/delete", {"assignment.id": str(assignment_id)}, self._tracer
        ):
            await self._invalidator.clear_single(assignment_id)
            await self._invalidator.clear_all_assignments_by_resource()
            await self._invalidator.clear_all_assignments_by_user()
            await self._invalidator.clear_cross_caches(None)
            await self._repo.delete(assignment_id)


def new_cached_assignment_repository(
    assignment_repo: IAssignmentRepository | None,
    *,
    client: CacheBackendProtocol | redis.Redis | None = None,
    tracer: trace.Tracer | None = None,
    logger: logging.Logger | None = None,
    settings: Settings | None = None,
) -> CachedAssignmentRepository:
    """Wrap an assignment store with the Redis cache.

    Args:
        assignment_repo: Authoritative assignment store.
        client: Cache backend, or a raw redis.asyncio client to wrap in RedisCacheBackend.
        tracer: Span factory; defaults to the process tracer provider (no-op until configured).
        logger: Diagnostic logger; defaults to the module logger.
        settings: Settings used when wrapping a raw Redis client.

    Raises:
        ConfigurationException: If a required option is missing or invalid.
    """
    if assignment_repo is None:
        raise ConfigurationException("An assignment repository is required", option="repo")
    if client is None:
        raise ConfigurationException("A cache client is required", option="client")
    if isinstance(client, redis.Redis):
        try:
            client = RedisCacheBackend(client, settings)
        except ValidationError as e:
            raise ConfigurationException(
                f"Cannot load cache settings for the Redis client: {e}", option="client"
            ) from e
    if not isinstance(client, CacheBackendProtocol):
        raise ConfigurationException(
            f"Cache client {type(client).__name__} does not implement the cache backend",
            option="client",
        )
    if tracer is not None and not callable(getattr(tracer, "start_as_current_span", None)):
        raise ConfigurationException("Tracer must be an OpenTelemetry tracer", option="tracer")
    if logger is not None and not isinstance(logger, (logging.Logger, logging.LoggerAdapter)):
        raise ConfigurationException("Logger must be a logging.Logger", option="logger")

    cache = CacheRepository(client, tracer=tracer, logger=logger)
    return CachedAssignmentRepository(assignment_repo, cache, tracer=tracer)
