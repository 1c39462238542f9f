"""Domain enumerations.

Enums represent fixed sets of domain values (resource kinds, assignment
relationships).
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class ResourceType(_ValuesMixin, str, Enum):
    """Kind of resource managed in the system.

    The value doubles as the cache namespace discriminator, so every cache
    key for a resource kind starts with its value (e.g. ``Issue:...``).
    """

    ASSIGNMENT = "Assignment"
    ATTACHMENT = "Attachment"
    COMMENT = "Comment"
    DOCUMENT = "Document"
    ISSUE = "Issue"
    ISSUE_RELATION = "IssueRelation"
    LABEL = "Label"
    NAMESPACE = "Namespace"
    NOTIFICATION = "Notification"
    ORGANIZATION = "Organization"
    PERMISSION = "Permission"
    PROJECT = "Project"
    ROLE = "Role"
    TODO = "Todo"
    USER = "User"
    USER_TOKEN = "UserToken"

    def __str__(self) -> str:
        return self.value


class AssignmentKind(_ValuesMixin, str, Enum):
    """Relationship between a user and the resource they are assigned to."""

    ASSIGNEE = "assignee"
    REVIEWER = "reviewer"

    def __str__(self) -> str:
        return self.value
