"""Repository interfaces (ports) for the application layer.

Protocols define contracts that store implementations and their caching
decorators must fulfill (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from assignment_cache.domain.entities.assignment import Assignment
    from assignment_cache.domain.value_objects.core import ID


# Assignment repository interface
class IAssignmentRepository(Protocol):
    """Protocol for assignment repository (DIP)."""

    async def create(self, assignment: Assignment) -> None:
        """Persist a new assignment."""

    async def get(self, assignment_id: ID) -> Assignment:
        """Return assignment by ID. Raises ResourceNotFoundException when absent."""

    async def get_by_user(
        self, user_id: ID, offset: int = 0, limit: int = 100
    ) -> list[Assignment]:
        """Return assignments of a user with pagination (store order preserved)."""

    async def get_by_resource(
        self, resource_id: ID, offset: int = 0, limit: int = 100
    ) -> list[Assignment]:
        """Return assignments attached to a resource with pagination."""

    async def delete(self, assignment_id: ID) -> None:
        """Delete assignment by ID."""
