"""Domain value objects.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

from dataclasses import dataclass
from typing import Any

from assignment_cache.core.constants import CACHE_KEY_GLOB_CHARS, CACHE_KEY_SEP
from assignment_cache.domain.enums import ResourceType
from assignment_cache.domain.exceptions import ValidationException
from assignment_cache.shared.utils.generators import generate_id


@dataclass(frozen=True)
class ID:
    """Typed identifier: an opaque value tagged with the resource kind it names.

    ``str(id)`` is the canonical form used in cache keys (the opaque value).
    The type is part of equality, so a User and an Issue sharing a value are
    different identifiers.
    """

    type: ResourceType
    value: str

    def __post_init__(self) -> None:
        """Validate type and value.

        Raises:
            ValidationException: If the type is unknown or the value is empty
                or contains the cache key separator or a glob character.
        """
        if not isinstance(self.type, ResourceType):
            try:
                object.__setattr__(self, "type", ResourceType(self.type))
            except ValueError:
                raise ValidationException(
                    f"Invalid resource type: {self.type!r}", field="type"
                ) from None
        if not isinstance(self.value, str) or not self.value:
            raise ValidationException("ID value must be a non-empty string", field="value")
        if CACHE_KEY_SEP in self.value or not CACHE_KEY_GLOB_CHARS.isdisjoint(self.value):
            raise ValidationException(
                f"ID value must not contain {CACHE_KEY_SEP!r} or any of "
                f"{''.join(sorted(CACHE_KEY_GLOB_CHARS))!r}",
                field="value",
            )

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        """Resource kind name (e.g. 'Issue')."""
        return self.type.value

    @classmethod
    def new(cls, resource_type: ResourceType) -> "ID":
        """Generate a fresh identifier for the given resource kind."""
        return cls(resource_type, generate_id())

    @classmethod
    def parse(cls, value: str, resource_type: ResourceType | str) -> "ID":
        """Build an identifier from its canonical form and a kind name."""
        return cls(resource_type, value)  # type: ignore[arg-type]

    def to_dict(self) -> dict[str, str]:
        return {"id": self.value, "type": self.type.value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ID":
        try:
            return cls(data["type"], data["id"])
        except (KeyError, TypeError) as e:
            raise ValidationException(f"Malformed ID: {data!r}") from e
