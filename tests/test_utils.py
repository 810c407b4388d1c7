from __future__ import annotations

from typing import Any, Iterable

from keysets import KeySet


def assert_key_set_match(obj: Any, expected: Iterable[Any]):
    assert isinstance(obj, KeySet)
    expected_set = set(expected)
    assert len(obj) == len(expected_set)
    assert set(obj.unsorted_list()) == expected_set
    for item in expected_set:
        assert item in obj
