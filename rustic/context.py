"""
Context manager for parsing configuration (e.g., legacy array tagging).
"""

from contextlib import contextmanager
from contextvars import ContextVar

# Context variable for legacy array tagging
_legacy_array_tag: ContextVar[bool] = ContextVar("legacy_array_tag", default=False)


def is_legacy_array_tag() -> bool:
    """Check if legacy array tagging is currently enabled."""
    return _legacy_array_tag.get()


@contextmanager
def parsing_context(*, legacy_array_tag: bool = False):
    """
    Context manager for parsing configuration.

    Args:
        legacy_array_tag: If True, lists and tuples report the runtime tag
            "object" instead of "array", so a field declared as "array" can
            never match. Reproduces the behavior of `typeof`-style runtimes.

    Example:
        from rustic import parsing_context, validate

        fields = [("tags", "array")]

        validate({"tags": ["a"]}, fields)       # Ok

        with parsing_context(legacy_array_tag=True):
            validate({"tags": ["a"]}, fields)   # Err(TypeError)
    """
    token = _legacy_array_tag.set(legacy_array_tag)
    try:
        yield
    finally:
        _legacy_array_tag.reset(token)
