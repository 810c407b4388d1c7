# Dict-backed Sets with Set Algebra
from __future__ import annotations

from .errors import UnhashableElementError, UnorderableElementError
from .key_set import KeySet, new
from .multimap import delete_cleanup_last, insert_or_new
from .ordering import SupportsLessThan, sorted_list

StrSet = KeySet[str]
"""A set of strings."""

__all__ = [
    "KeySet",
    "new",
    "StrSet",
    # from .ordering
    "SupportsLessThan",
    "sorted_list",
    # from .multimap
    "insert_or_new",
    "delete_cleanup_last",
    # from .errors
    "UnhashableElementError",
    "UnorderableElementError",
]
