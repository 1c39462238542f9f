"""Identifier generation (CUID2)."""

from cuid2 import cuid_wrapper

_cuid_generator = cuid_wrapper()


def generate_id() -> str:
    """Return a new collision-resistant identifier value.

    CUID2 values are lowercase alphanumeric, so they never contain the
    cache key separator.
    """
    result = _cuid_generator()
    if not isinstance(result, str):
        raise TypeError(
            f"Expected str from cuid generator, got {type(result).__name__}"
        )
    return result
