"""Helpers for dicts that map keys to sets of values."""

from __future__ import annotations

from typing import MutableMapping, TypeVar

from .key_set import KeySet, new

__all__ = ["insert_or_new", "delete_cleanup_last"]

K = TypeVar("K")
T = TypeVar("T")


def insert_or_new(mapping: MutableMapping[K, KeySet[T]], key: K, value: T) -> None:
    """Add ``value`` to the set stored under ``key``, creating the set if needed."""
    existing = mapping.get(key)
    if existing is None:
        mapping[key] = new(value)
    else:
        existing.insert(value)


def delete_cleanup_last(mapping: MutableMapping[K, KeySet[T]], key: K, value: T) -> None:
    """Remove ``value`` from the set stored under ``key``.

    The key is dropped from ``mapping`` once its set becomes empty, so no empty sets are left
    behind. A missing key is ignored.
    """
    existing = mapping.get(key)
    if existing is None:
        return
    existing.delete(value)
    if existing.is_empty():
        del mapping[key]
