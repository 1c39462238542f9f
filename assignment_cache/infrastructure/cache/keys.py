"""Cache key builders. Single place for key format (DRY).

Every key starts with a resource-type namespace (``Assignment``,
``Document``, ``Issue``, ...) so that pattern deletes can target one
namespace without touching the others. Key components must not contain
CACHE_KEY_SEP or Redis glob characters, so a key never collides with
another and a pattern built from it matches exactly what it names. The
wildcard is only valid as a whole component and only in patterns.
"""

from assignment_cache.core.constants import (
    ASSIGNMENT_LIST_METHODS,
    CACHE_KEY_GLOB_CHARS,
    CACHE_KEY_SEP,
    CACHE_KEY_WILDCARD,
    METHOD_GET_BY_RESOURCE,
    METHOD_GET_BY_USER,
)
from assignment_cache.domain.enums import ResourceType
from assignment_cache.domain.value_objects.core import ID

KeyPart = ID | ResourceType | int | str


def _validate_key_component(value: str, name: str) -> None:
    """Raise ValueError if value is empty or contains the separator or a glob character.

    Args:
        value: String component used in a cache key.
        name: Name of the component (for error message).

    Raises:
        ValueError: If value is empty or contains CACHE_KEY_SEP or CACHE_KEY_GLOB_CHARS.
    """
    if not value:
        raise ValueError(f"Cache key component {name!r} must not be empty")
    if CACHE_KEY_SEP in value:
        raise ValueError(
            f"Cache key component {name!r} must not contain separator {CACHE_KEY_SEP!r}"
        )
    if not CACHE_KEY_GLOB_CHARS.isdisjoint(value):
        raise ValueError(f"Cache key component {name!r} must not contain glob characters")


def _canonical(part: KeyPart, position: int) -> str:
    """Return the textual form of a key component."""
    if isinstance(part, ID):
        return str(part)
    if isinstance(part, ResourceType):
        return part.value
    if isinstance(part, bool):
        raise TypeError(f"Cache key component #{position} must not be a bool")
    if isinstance(part, int):
        return str(part)
    if part == CACHE_KEY_WILDCARD:
        return part
    if isinstance(part, str):
        _validate_key_component(part, f"#{position}")
        return part
    raise TypeError(
        f"Unsupported cache key component #{position}: {type(part).__name__}"
    )


def compose_cache_key(namespace: ResourceType | str, *parts: KeyPart) -> str:
    """Join a namespace discriminator and its parts into a cache key or pattern.

    Args:
        namespace: Resource type (or its name) owning the key.
        *parts: IDs, method names, integers or the wildcard ``*``.

    Returns:
        Key such as ``Assignment:GetByUser:<user>:0:10``.
    """
    ns = namespace.value if isinstance(namespace, ResourceType) else namespace
    if ns == CACHE_KEY_WILDCARD:
        raise ValueError("Cache key namespace must not be a wildcard")
    _validate_key_component(ns, "namespace")
    segments = [ns]
    segments.extend(_canonical(part, i) for i, part in enumerate(parts))
    return CACHE_KEY_SEP.join(segments)


def assignment_key(assignment_id: ID) -> str:
    """Cache key for a single assignment by ID."""
    return compose_cache_key(ResourceType.ASSIGNMENT, assignment_id)


def assignment_list_key(method: str, selector: ID, offset: int, limit: int) -> str:
    """Cache key for a paginated assignment list read (GetByUser / GetByResource)."""
    if method not in ASSIGNMENT_LIST_METHODS:
        raise ValueError(f"Unknown assignment list method: {method!r}")
    return compose_cache_key(ResourceType.ASSIGNMENT, method, selector, offset, limit)


def assignment_by_user_pattern(user_id: ID | None = None) -> str:
    """Pattern for list reads of one user, or of every user when user_id is None."""
    if user_id is None:
        return compose_cache_key(ResourceType.ASSIGNMENT, METHOD_GET_BY_USER, CACHE_KEY_WILDCARD)
    return compose_cache_key(
        ResourceType.ASSIGNMENT, METHOD_GET_BY_USER, user_id, CACHE_KEY_WILDCARD
    )


def assignment_by_resource_pattern(resource_id: ID | None = None) -> str:
    """Pattern for list reads of one resource, or of every resource when resource_id is None."""
    if resource_id is None:
        return compose_cache_key(
            ResourceType.ASSIGNMENT, METHOD_GET_BY_RESOURCE, CACHE_KEY_WILDCARD
        )
    return compose_cache_key(
        ResourceType.ASSIGNMENT, METHOD_GET_BY_RESOURCE, resource_id, CACHE_KEY_WILDCARD
    )


def namespace_pattern(resource_type: ResourceType) -> str:
    """Pattern covering every key of a resource namespace (e.g. ``Issue:*``)."""
    return compose_cache_key(resource_type, CACHE_KEY_WILDCARD)
