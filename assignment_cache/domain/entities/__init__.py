"""Domain entities.

Pure domain models; no cache or persistence concerns.
"""

from assignment_cache.domain.entities.assignment import Assignment

__all__ = ["Assignment"]
