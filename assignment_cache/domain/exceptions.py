"""Domain exceptions for the assignment cache.

Defines the error taxonomy surfaced to callers of the cached repository.
Cache failures keep the key or pattern that failed in ``details`` and are
chained to the backend error that caused them.
"""

from typing import Any


class AssignmentCacheException(Exception):
    """Base exception for all assignment cache errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. key, resource_type).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(AssignmentCacheException):
    """Raised when input validation fails (e.g. invalid id or assignment details)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(AssignmentCacheException):
    """Raised by stores when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'Assignment').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class ConfigurationException(AssignmentCacheException):
    """Raised when a repository or backend cannot be constructed from its options."""

    def __init__(self, message: str, option: str | None = None) -> None:
        details = {"option": option} if option else {}
        super().__init__(message, "CONFIGURATION_ERROR", details)


class CacheException(AssignmentCacheException):
    """Base exception for cache backend failures."""


class CacheReadError(CacheException):
    """Cache read or deserialization failed."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(
            f"Failed to read cache: {key}",
            "CACHE_READ_ERROR",
            {"key": key, "reason": reason},
        )


class CacheWriteError(CacheException):
    """Cache write or serialization failed."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(
            f"Failed to write cache: {key}",
            "CACHE_WRITE_ERROR",
            {"key": key, "reason": reason},
        )


class CacheDeleteError(CacheException):
    """Cache delete or key scan failed."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(
            f"Failed to delete cache: {key}",
            "CACHE_DELETE_ERROR",
            {"key": key, "reason": reason},
        )


class UnexpectedCachedResourceError(CacheException):
    """Raised when an assignment points at a resource kind with no cross-cache plan."""

    def __init__(self, resource_type: str) -> None:
        super().__init__(
            f"Unexpected cached resource type: {resource_type}",
            "UNEXPECTED_CACHED_RESOURCE",
            {"resource_type": resource_type},
        )
