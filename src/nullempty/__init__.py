"""
nullempty

A single text predicate: is a value absent or empty.

Absent (None) and present-but-zero-length ("") collapse to the same
answer. Anything with at least one character, whitespace included,
is not empty.
"""

from .predicates import is_null_or_empty

__version__ = "0.1.0"

__all__ = ["is_null_or_empty"]
