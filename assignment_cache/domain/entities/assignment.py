"""Assignment domain entity.

An assignment links a user to a resource (e.g. an issue or a document)
with a kind such as assignee or reviewer.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from assignment_cache.domain.enums import AssignmentKind, ResourceType
from assignment_cache.domain.exceptions import ValidationException
from assignment_cache.domain.value_objects.core import ID


@dataclass(frozen=True)
class Assignment:
    """Domain entity for a user-to-resource assignment.

    Validation runs on construction. The resource may be of any kind; the
    cache layer decides which kinds it can fan out invalidation to.
    """

    id: ID
    kind: AssignmentKind
    user: ID
    resource: ID
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.kind, AssignmentKind):
            try:
                object.__setattr__(self, "kind", AssignmentKind(self.kind))
            except ValueError:
                raise ValidationException(
                    f"Invalid assignment kind: {self.kind!r}", field="kind"
                ) from None
        self.validate()

    def validate(self) -> None:
        """Validate assignment details. Raises ValidationException if invalid."""
        if not isinstance(self.id, ID) or self.id.type is not ResourceType.ASSIGNMENT:
            raise ValidationException("Assignment ID must be an Assignment ID", field="id")
        if not isinstance(self.user, ID) or self.user.type is not ResourceType.USER:
            raise ValidationException("Assigned user must be a User ID", field="user")
        if not isinstance(self.resource, ID):
            raise ValidationException("Assigned resource must be an ID", field="resource")

    @classmethod
    def new(cls, kind: AssignmentKind, user: ID, resource: ID) -> "Assignment":
        """Create a new assignment with a freshly generated ID."""
        return cls(id=ID.new(ResourceType.ASSIGNMENT), kind=kind, user=user, resource=resource)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-compatible form stored in the cache."""
        return {
            "id": self.id.to_dict(),
            "kind": self.kind.value,
            "user": self.user.to_dict(),
            "resource": self.resource.to_dict(),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Assignment":
        """Build an Assignment from its cached form; deserializes ISO datetime.

        Raises:
            ValidationException: If the data is malformed or fails validation.
        """
        try:
            created_at = data.get("created_at")
            return cls(
                id=ID.from_dict(data["id"]),
                kind=data["kind"],
                user=ID.from_dict(data["user"]),
                resource=ID.from_dict(data["resource"]),
                created_at=datetime.fromisoformat(created_at) if created_at else None,
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValidationException(f"Malformed assignment: {e}") from e
