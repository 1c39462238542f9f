"""Domain value objects."""

from assignment_cache.domain.value_objects.core import ID

__all__ = ["ID"]
