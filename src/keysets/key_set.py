from __future__ import annotations

from typing import Collection, Iterable, Iterator, TypeVar

from typing_extensions import Self

from .errors import UnhashableElementError

__all__ = ["KeySet", "new"]

T = TypeVar("T")


class KeySet(Collection[T]):
    """An unordered set of hashable elements backed by a dict.

    Every element is a key of the backing dict, mapped to `None`. The set is mutable and shared by
    reference: mutating methods change the receiver in place and return it to allow chaining, while
    `union`, `intersection` and `difference` always build a new set.

    The empty set ``KeySet()`` is the zero value. Wherever another set is expected as an operand,
    `None` is accepted as well and behaves exactly like an empty set.

    Iteration follows insertion order, but that is not part of the contract. Use
    `keysets.sorted_list` for a deterministic order.
    """

    __slots__ = ("_inner",)

    _inner: dict[T, None]

    def __init__(self, iterable: Iterable[T] = ()) -> None:
        self._inner = {}
        for item in iterable:
            self._add(item)

    @staticmethod
    def _from_inner(inner: dict[T, None]) -> KeySet[T]:
        self: KeySet[T] = object.__new__(KeySet)
        self._inner = inner
        return self

    def _add(self, item: T) -> None:
        try:
            self._inner[item] = None
        except TypeError as exc:
            raise UnhashableElementError(item) from exc

    def _discard(self, item: T) -> None:
        try:
            self._inner.pop(item, None)
        except TypeError as exc:
            raise UnhashableElementError(item) from exc

    def copy(self) -> KeySet[T]:
        return self._from_inner(self._inner.copy())

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner)

    def __bool__(self) -> bool:
        return bool(self._inner)

    def __len__(self) -> int:
        return len(self._inner)

    def __contains__(self, item: object) -> bool:
        try:
            return item in self._inner
        except TypeError as exc:
            raise UnhashableElementError(item) from exc

    def __repr__(self) -> str:
        try:
            items = sorted(self._inner)  # type: ignore
        except TypeError:
            items = list(self._inner)
        return f"{type(self).__name__}({items!r})"

    def contains(self, item: T) -> bool:
        """Return whether ``item`` is an element of this set."""
        return item in self

    def contains_all(self, *items: T) -> bool:
        """Return whether all ``items`` are elements of this set."""
        return all(item in self for item in items)

    def is_empty(self) -> bool:
        return not self._inner

    def unsorted_list(self) -> list[T]:
        """Return all elements as a list in no particular order."""
        return list(self._inner)

    def insert(self, item: T) -> Self:
        """Add an element to the set."""
        self._add(item)
        return self

    def insert_all(self, *items: T) -> Self:
        """Add all given elements to the set."""
        for item in items:
            self._add(item)
        return self

    def insert_contains(self, item: T) -> bool:
        """Add an element to the set and return whether it was already present.

        Returns `False` when this call added the element and `True` when the set was left
        unchanged.
        """
        if item in self:
            return True
        self._inner[item] = None
        return False

    def delete(self, item: T) -> Self:
        """Remove an element from the set if it is present."""
        self._discard(item)
        return self

    def delete_all(self, *items: T) -> Self:
        """Remove all given elements that are present."""
        for item in items:
            self._discard(item)
        return self

    def union(self, other: KeySet[T] | None) -> KeySet[T]:
        """Return a new set with the elements of this set and ``other``."""
        result = self.copy()
        result.merge(other)
        return result

    def __or__(self, other: KeySet[T]) -> KeySet[T]:
        if not isinstance(other, KeySet):
            return NotImplemented  # pragma: no cover
        return self.union(other)

    def merge(self, other: KeySet[T] | None) -> Self:
        """Add all elements of ``other`` to this set in place and return this set.

        The resulting elements are the same as those of `union`, but unlike `union` this modifies
        the receiver.
        """
        if other is not None:
            self._inner.update(other._inner)
        return self

    def __ior__(self, other: KeySet[T]) -> Self:
        if not isinstance(other, KeySet):
            return NotImplemented  # pragma: no cover
        return self.merge(other)

    def intersection(self, other: KeySet[T] | None) -> KeySet[T]:
        """Return a new set with the elements found in both this set and ``other``."""
        if other is None:
            return KeySet()
        if len(other) < len(self):
            small, large = other._inner, self._inner
        else:
            small, large = self._inner, other._inner
        return KeySet._from_inner({item: None for item in small if item in large})

    def __and__(self, other: KeySet[T]) -> KeySet[T]:
        if not isinstance(other, KeySet):
            return NotImplemented  # pragma: no cover
        return self.intersection(other)

    def intersect_in_place(self, other: KeySet[T] | None) -> Self:
        """Keep only the elements that are also found in ``other``."""
        keep = {} if other is None else other._inner
        self._inner = {item: None for item in self._inner if item in keep}
        return self

    def __iand__(self, other: KeySet[T]) -> Self:
        if not isinstance(other, KeySet):
            return NotImplemented  # pragma: no cover
        return self.intersect_in_place(other)

    def difference(self, other: KeySet[T] | None) -> KeySet[T]:
        """Return a new set with the elements of this set that are not in ``other``."""
        if other is None:
            return self.copy()
        return KeySet._from_inner({item: None for item in self._inner if item not in other._inner})

    def __sub__(self, other: KeySet[T]) -> KeySet[T]:
        if not isinstance(other, KeySet):
            return NotImplemented  # pragma: no cover
        return self.difference(other)

    def difference_in_place(self, other: KeySet[T] | None) -> Self:
        """Remove all elements found in ``other`` from this set."""
        if other is self:
            self._inner.clear()
        elif other is not None:
            for item in other._inner:
                self._inner.pop(item, None)
        return self

    def __isub__(self, other: KeySet[T]) -> Self:
        if not isinstance(other, KeySet):
            return NotImplemented  # pragma: no cover
        return self.difference_in_place(other)

    def diff(self, other: KeySet[T] | None) -> tuple[list[T], list[T]]:
        """Return the elements only found in this set and those only found in ``other``."""
        right_inner = {} if other is None else other._inner
        left = [item for item in self._inner if item not in right_inner]
        right = [item for item in right_inner if item not in self._inner]
        return left, right

    def superset_of(self, other: KeySet[T] | None) -> bool:
        """Return whether every element of ``other`` is also an element of this set."""
        if other is None:
            return True
        if len(other) > len(self):
            return False
        return all(item in self._inner for item in other._inner)

    def __ge__(self, other: KeySet[T]) -> bool:
        if not isinstance(other, KeySet):
            return NotImplemented  # pragma: no cover
        return self.superset_of(other)

    def __gt__(self, other: KeySet[T]) -> bool:
        if not isinstance(other, KeySet):
            return NotImplemented  # pragma: no cover
        return len(self) > len(other) and self.superset_of(other)

    def subset_of(self, other: KeySet[T] | None) -> bool:
        """Return whether every element of this set is also an element of ``other``."""
        if other is None:
            return not self._inner
        return other.superset_of(self)

    def __le__(self, other: KeySet[T]) -> bool:
        if not isinstance(other, KeySet):
            return NotImplemented  # pragma: no cover
        return self.subset_of(other)

    def __lt__(self, other: KeySet[T]) -> bool:
        if not isinstance(other, KeySet):
            return NotImplemented  # pragma: no cover
        return len(self) < len(other) and self.subset_of(other)

    def equals(self, other: KeySet[T] | None) -> bool:
        """Return whether this set and ``other`` contain exactly the same elements."""
        if other is None:
            return not self._inner
        return self._inner.keys() == other._inner.keys()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (set, frozenset)):
            return self._inner.keys() == other
        if not isinstance(other, KeySet):
            return NotImplemented  # pragma: no cover
        return self.equals(other)


def new(*items: T) -> KeySet[T]:
    """Create a set holding the distinct values among ``items``."""
    return KeySet(items)
