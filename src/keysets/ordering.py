from __future__ import annotations

import typing
from typing import Any, TypeVar

from typing_extensions import Protocol

from .errors import UnorderableElementError

if typing.TYPE_CHECKING:
    from .key_set import KeySet

__all__ = ["SupportsLessThan", "sorted_list"]


class SupportsLessThan(Protocol):
    """Element types with a total order, as required for sorted enumeration."""

    def __lt__(self, other: Any, /) -> bool:
        ...


OrderedT = TypeVar("OrderedT", bound=SupportsLessThan)


def sorted_list(key_set: KeySet[OrderedT] | None) -> list[OrderedT]:
    """Return the elements of a set in ascending order.

    The result only depends on the elements, not on the order they were inserted in. An empty set
    or `None` results in an empty list.

    Raises `UnorderableElementError` if the elements cannot be compared with each other.
    """
    if key_set is None:
        return []
    items = key_set.unsorted_list()
    try:
        items.sort()
    except TypeError as exc:
        raise UnorderableElementError(items) from exc
    return items
