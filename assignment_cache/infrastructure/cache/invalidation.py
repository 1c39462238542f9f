"""Assignment cache invalidation plan.

Assignment reads are cached in the Assignment namespace, and Document and
Issue projections embed assignment data in their own namespaces. Each
helper deletes one slice of that keyspace; mutations chain them in a fixed
order and stop at the first failure.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from assignment_cache.domain.entities.assignment import Assignment
from assignment_cache.domain.enums import ResourceType
from assignment_cache.domain.exceptions import UnexpectedCachedResourceError
from assignment_cache.domain.value_objects.core import ID
from assignment_cache.infrastructure.cache.cache_repository import CacheRepository
from assignment_cache.infrastructure.cache.keys import (
    assignment_by_resource_pattern,
    assignment_by_user_pattern,
    assignment_key,
    namespace_pattern,
)

# Resource kind an assignment points at -> namespaces whose entries embed it.
CROSS_CACHE_NAMESPACES: Mapping[ResourceType, tuple[ResourceType, ...]] = MappingProxyType(
    {
        ResourceType.DOCUMENT: (ResourceType.DOCUMENT,),
        ResourceType.ISSUE: (ResourceType.ISSUE,),
    }
)

# Purged when the assignment (and so its resource kind) is unknown.
ALL_CROSS_CACHE_NAMESPACES: tuple[ResourceType, ...] = (
    ResourceType.DOCUMENT,
    ResourceType.ISSUE,
)


class AssignmentCacheInvalidator:
    """Deletes assignment cache entries and the sibling projections embedding them."""

    def __init__(self, cache: CacheRepository) -> None:
        self._cache = cache

    async def clear_single(self, assignment_id: ID) -> None:
        """Delete the single-entity entry ``Assignment:<id>``."""
        await self._cache.delete(assignment_key(assignment_id))

    async def clear_assignments_by_resource(self, resource_id: ID) -> None:
        """Delete list reads of one resource (``Assignment:GetByResource:<id>:*``)."""
        await self._cache.delete_pattern(assignment_by_resource_pattern(resource_id))

    async def clear_all_assignments_by_resource(self) -> None:
        """Delete list reads of every resource (``Assignment:GetByResource:*``)."""
        await self._cache.delete_pattern(assignment_by_resource_pattern())

    async def clear_assignments_by_user(self, user_id: ID) -> None:
        """Delete list reads of one user (``Assignment:GetByUser:<id>:*``)."""
        await self._cache.delete_pattern(assignment_by_user_pattern(user_id))

    async def clear_all_assignments_by_user(self) -> None:
        """Delete list reads of every user (``Assignment:GetByUser:*``)."""
        await self._cache.delete_pattern(assignment_by_user_pattern())

    async def clear_cross_caches(self, assignment: Assignment | None) -> None:
        """Purge sibling namespaces whose projections may embed the assignment.

        With no assignment every known sibling namespace is purged.

        Raises:
            UnexpectedCachedResourceError: If the assignment's resource kind
                has no cross-cache plan.
        """
        if assignment is None:
            namespaces = ALL_CROSS_CACHE_NAMESPACES
        else:
            resource_type = assignment.resource.type
            namespaces = CROSS_CACHE_NAMESPACES.get(resource_type, ())
            if not namespaces:
                raise UnexpectedCachedResourceError(resource_type.value)
        for namespace in namespaces:
            await self._cache.delete_pattern(namespace_pattern(namespace))
