"""Cache: Redis backend, key builders, invalidation and cached repositories.

Key format lives in keys.py (DRY); CacheRepository maps backend failures
into the cache error taxonomy.
"""

from assignment_cache.infrastructure.cache.assignment_repo import (
    CachedAssignmentRepository,
    new_cached_assignment_repository,
)
from assignment_cache.infrastructure.cache.cache_protocol import CacheBackendProtocol
from assignment_cache.infrastructure.cache.cache_repository import CacheRepository
from assignment_cache.infrastructure.cache.invalidation import (
    CROSS_CACHE_NAMESPACES,
    AssignmentCacheInvalidator,
)
from assignment_cache.infrastructure.cache.keys import (
    assignment_by_resource_pattern,
    assignment_by_user_pattern,
    assignment_key,
    assignment_list_key,
    compose_cache_key,
    namespace_pattern,
)
from assignment_cache.infrastructure.cache.redis_cache import (
    RedisCacheBackend,
    create_redis_client,
)

__all__ = [
    "AssignmentCacheInvalidator",
    "CROSS_CACHE_NAMESPACES",
    "CacheBackendProtocol",
    "CacheRepository",
    "CachedAssignmentRepository",
    "RedisCacheBackend",
    "assignment_by_resource_pattern",
    "assignment_by_user_pattern",
    "assignment_key",
    "assignment_list_key",
    "compose_cache_key",
    "create_redis_client",
    "namespace_pattern",
    "new_cached_assignment_repository",
]
