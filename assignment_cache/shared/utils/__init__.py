"""Shared helpers (id generation)."""

from assignment_cache.shared.utils.generators import generate_id

__all__ = ["generate_id"]
