"""Pytest configuration and fixtures for assignment_cache.

Provides a recording in-memory cache backend (ordering and failure
injection), an in-memory span exporter, fakeredis clients and sample
identifiers. All imports use assignment_cache.*.
"""

from fnmatch import fnmatchcase
from typing import Any
from unittest.mock import AsyncMock

import fakeredis.aioredis
import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from assignment_cache.core.config import Settings
from assignment_cache.domain.entities.assignment import Assignment
from assignment_cache.domain.enums import AssignmentKind, ResourceType
from assignment_cache.domain.value_objects.core import ID
from assignment_cache.infrastructure.cache.assignment_repo import CachedAssignmentRepository
from assignment_cache.infrastructure.cache.cache_repository import CacheRepository


class RecordingCacheBackend:
    """In-memory CacheBackendProtocol that logs every call into a shared list.

    ``failures`` maps (operation, key_or_pattern) to the exception to raise.
    Keys never contain glob characters other than a whole-part ``*``, so
    fnmatchcase agrees with Redis SCAN MATCH here; Redis glob behaviour
    itself is covered by the fakeredis tests.
    """

    def __init__(self, calls: list[tuple[Any, ...]]) -> None:
        self.calls = calls
        self.data: dict[str, Any] = {}
        self.failures: dict[tuple[str, str], Exception] = {}

    def _maybe_fail(self, op: str, key: str) -> None:
        self.calls.append((op, key))
        error = self.failures.get((op, key))
        if error is not None:
            raise error

    async def get_json(self, key: str) -> Any:
        self._maybe_fail("get_json", key)
        return self.data.get(key)

    async def set_json(self, key: str, value: Any) -> None:
        self._maybe_fail("set_json", key)
        self.data[key] = value

    async def delete(self, key: str) -> None:
        self._maybe_fail("delete", key)
        self.data.pop(key, None)

    async def keys_matching(self, pattern: str) -> list[str]:
        self._maybe_fail("keys_matching", pattern)
        return sorted(k for k in self.data if fnmatchcase(k, pattern))


@pytest.fixture
def calls() -> list[tuple[Any, ...]]:
    """Ordered log shared by the recording backend and the store double."""
    return []


@pytest.fixture
def backend(calls: list[tuple[Any, ...]]) -> RecordingCacheBackend:
    return RecordingCacheBackend(calls)


@pytest.fixture
def span_exporter() -> InMemorySpanExporter:
    return InMemorySpanExporter()


@pytest.fixture
def tracer(span_exporter: InMemorySpanExporter):
    """Tracer writing finished spans to span_exporter (global provider untouched)."""
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(span_exporter))
    return provider.get_tracer("tests")


@pytest.fixture
def cache(backend: RecordingCacheBackend, tracer) -> CacheRepository:
    return CacheRepository(backend, tracer=tracer)


@pytest.fixture
def store(calls: list[tuple[Any, ...]]) -> AsyncMock:
    """Assignment store double; each call is appended to ``calls``.

    Set ``store.results[name]`` to the value (or exception) a method returns.
    """
    store = AsyncMock()
    store.results = {}

    def record(name: str):
        def side_effect(*args: Any) -> Any:
            calls.append((f"store.{name}", *args))
            result = store.results.get(name)
            if isinstance(result, Exception):
                raise result
            return result

        return side_effect

    for name in ("create", "get", "get_by_user", "get_by_resource", "delete"):
        getattr(store, name).side_effect = record(name)
    return store


@pytest.fixture
def repo(store: AsyncMock, cache: CacheRepository, tracer) -> CachedAssignmentRepository:
    return CachedAssignmentRepository(store, cache, tracer=tracer)


@pytest.fixture
def user_id() -> ID:
    return ID(ResourceType.USER, "user1")


@pytest.fixture
def issue_id() -> ID:
    return ID(ResourceType.ISSUE, "issue1")


@pytest.fixture
def document_id() -> ID:
    return ID(ResourceType.DOCUMENT, "doc1")


@pytest.fixture
def assignment_id() -> ID:
    return ID(ResourceType.ASSIGNMENT, "asg1")


@pytest.fixture
def issue_assignment(assignment_id: ID, user_id: ID, issue_id: ID) -> Assignment:
    return Assignment(
        id=assignment_id, kind=AssignmentKind.ASSIGNEE, user=user_id, resource=issue_id
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture
async def fake_redis():
    client = fakeredis.aioredis.FakeRedis(decode_responses=True)
    yield client
    await client.flushall()
    await client.aclose()
