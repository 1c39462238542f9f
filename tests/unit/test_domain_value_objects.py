"""Tests for the typed identifier value object (ID)."""

import pytest

from assignment_cache.domain.enums import ResourceType
from assignment_cache.domain.exceptions import ValidationException
from assignment_cache.domain.value_objects.core import ID


class TestID:
    """ID: resource type + opaque value, canonical form is the value."""

    def test_str_is_canonical_value(self) -> None:
        assert str(ID(ResourceType.ISSUE, "abc123")) == "abc123"

    def test_label_is_resource_type_name(self) -> None:
        assert ID(ResourceType.ISSUE, "abc123").label == "Issue"

    def test_type_is_part_of_equality(self) -> None:
        assert ID(ResourceType.USER, "x1") != ID(ResourceType.ISSUE, "x1")
        assert ID(ResourceType.USER, "x1") == ID(ResourceType.USER, "x1")

    def test_type_accepts_name(self) -> None:
        assert ID.parse("x1", "Document").type is ResourceType.DOCUMENT

    def test_unknown_type_rejected(self) -> None:
        with pytest.raises(ValidationException, match="Invalid resource type"):
            ID("Spaceship", "x1")  # type: ignore[arg-type]

    def test_empty_value_rejected(self) -> None:
        with pytest.raises(ValidationException, match="non-empty"):
            ID(ResourceType.USER, "")

    def test_separator_in_value_rejected(self) -> None:
        with pytest.raises(ValidationException, match="must not contain"):
            ID(ResourceType.USER, "a:b")

    def test_wildcard_in_value_rejected(self) -> None:
        with pytest.raises(ValidationException, match="must not contain"):
            ID(ResourceType.USER, "a*")

    @pytest.mark.parametrize("value", ["u?1", "u[1", "u]1", "u\\1"])
    def test_glob_characters_in_value_rejected(self, value: str) -> None:
        with pytest.raises(ValidationException, match="must not contain") as exc_info:
            ID(ResourceType.USER, value)
        assert exc_info.value.details["field"] == "value"

    def test_new_generates_distinct_values(self) -> None:
        first = ID.new(ResourceType.ASSIGNMENT)
        second = ID.new(ResourceType.ASSIGNMENT)
        assert first.type is ResourceType.ASSIGNMENT
        assert first != second
        assert ":" not in first.value

    def test_dict_form(self) -> None:
        id_ = ID(ResourceType.ISSUE, "i1")
        assert id_.to_dict() == {"id": "i1", "type": "Issue"}
        assert ID.from_dict({"id": "i1", "type": "Issue"}) == id_

    def test_from_dict_missing_field_rejected(self) -> None:
        with pytest.raises(ValidationException, match="Malformed ID"):
            ID.from_dict({"id": "i1"})
