"""Application interfaces (ports)."""

from assignment_cache.application.interfaces.repositories import IAssignmentRepository

__all__ = ["IAssignmentRepository"]
