"""
Emptiness predicate for optional text values.

Pure function, no state, no failure path.
"""
from __future__ import annotations

from typing import Optional


def is_null_or_empty(value: Optional[str]) -> bool:
    """
    Report whether a text value is absent or has zero length.

    Args:
        value: Text to check, or None when no value was supplied.

    Returns:
        True if value is None or "", False for any non-empty string.
        Whitespace counts as content.
    """
    return value is None or len(value) == 0
