"""Cache backend protocol (DIP). Real implementation: RedisCacheBackend."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CacheBackendProtocol(Protocol):
    """Primitive key/value operations the cache adapter is built on.

    Implementations raise their own transport or serialization errors;
    CacheRepository maps them into the cache error taxonomy.
    """

    async def get_json(self, key: str) -> Any:
        """Return the deserialized value, or None on miss."""
        ...

    async def set_json(self, key: str, value: Any) -> None:
        """Serialize and store value (any expiry is the backend's policy)."""
        ...

    async def delete(self, key: str) -> None:
        """Remove key; removing an absent key is not an error."""
        ...

    async def keys_matching(self, pattern: str) -> list[str]:
        """Return every key matching a glob pattern."""
        ...
