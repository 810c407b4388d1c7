"""Errors raised when an element does not satisfy a set's type constraints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class UnhashableElementError(TypeError):
    """An element that cannot be stored in a `KeySet` because it is not hashable.

    Raised by the call that tries to introduce the element (construction, insertion or a
    membership query), so an unhashable value never ends up inside a set.
    """

    element: Any
    message: str = "set elements must be hashable"

    def __str__(self) -> str:
        return f"{self.message}, got {type(self.element).__name__}: {self.element!r}"


@dataclass(eq=False)
class UnorderableElementError(TypeError):
    """Elements of a `KeySet` that cannot be sorted because they do not support ordering."""

    elements: list[Any]
    message: str = "sorted enumeration requires mutually comparable elements"

    def __str__(self) -> str:
        kinds = sorted({type(element).__name__ for element in self.elements})
        return f"{self.message}, got element types: {', '.join(kinds)}"
