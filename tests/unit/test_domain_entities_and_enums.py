"""Tests for the Assignment entity and domain enums."""

from datetime import datetime, timezone

import pytest

from assignment_cache.domain.entities.assignment import Assignment
from assignment_cache.domain.enums import AssignmentKind, ResourceType
from assignment_cache.domain.exceptions import ValidationException
from assignment_cache.domain.value_objects.core import ID


def test_resource_type_value_is_namespace() -> None:
    assert ResourceType.ASSIGNMENT.value == "Assignment"
    assert str(ResourceType.ISSUE) == "Issue"
    assert "Document" in ResourceType.values()
    assert len(ResourceType.values()) == 16


def test_assignment_kind_values() -> None:
    assert AssignmentKind.values() == ["assignee", "reviewer"]


class TestAssignment:
    def test_new_allocates_assignment_id(self, user_id: ID, issue_id: ID) -> None:
        a = Assignment.new(AssignmentKind.REVIEWER, user_id, issue_id)
        assert a.id.type is ResourceType.ASSIGNMENT
        assert a.kind is AssignmentKind.REVIEWER

    def test_kind_accepts_value(self, assignment_id: ID, user_id: ID, issue_id: ID) -> None:
        a = Assignment(id=assignment_id, kind="assignee", user=user_id, resource=issue_id)  # type: ignore[arg-type]
        assert a.kind is AssignmentKind.ASSIGNEE

    def test_invalid_kind_rejected(self, assignment_id: ID, user_id: ID, issue_id: ID) -> None:
        with pytest.raises(ValidationException, match="Invalid assignment kind"):
            Assignment(id=assignment_id, kind="owner", user=user_id, resource=issue_id)  # type: ignore[arg-type]

    def test_id_must_be_assignment(self, user_id: ID, issue_id: ID) -> None:
        with pytest.raises(ValidationException) as exc_info:
            Assignment(id=issue_id, kind=AssignmentKind.ASSIGNEE, user=user_id, resource=issue_id)
        assert exc_info.value.details == {"field": "id"}

    def test_user_must_be_user(self, assignment_id: ID, issue_id: ID) -> None:
        with pytest.raises(ValidationException) as exc_info:
            Assignment(
                id=assignment_id, kind=AssignmentKind.ASSIGNEE, user=issue_id, resource=issue_id
            )
        assert exc_info.value.details == {"field": "user"}

    def test_any_resource_kind_allowed(self, assignment_id: ID, user_id: ID) -> None:
        project = ID(ResourceType.PROJECT, "p1")
        a = Assignment(id=assignment_id, kind=AssignmentKind.ASSIGNEE, user=user_id, resource=project)
        assert a.resource.type is ResourceType.PROJECT

    def test_cached_form(self, issue_assignment: Assignment) -> None:
        created = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
        a = Assignment(
            id=issue_assignment.id,
            kind=issue_assignment.kind,
            user=issue_assignment.user,
            resource=issue_assignment.resource,
            created_at=created,
        )
        data = a.to_dict()
        assert data == {
            "id": {"id": "asg1", "type": "Assignment"},
            "kind": "assignee",
            "user": {"id": "user1", "type": "User"},
            "resource": {"id": "issue1", "type": "Issue"},
            "created_at": "2024-05-01T12:30:00+00:00",
        }
        assert Assignment.from_dict(data) == a

    def test_from_dict_malformed(self) -> None:
        with pytest.raises(ValidationException, match="Malformed assignment"):
            Assignment.from_dict({"kind": "assignee"})
