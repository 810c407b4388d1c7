from __future__ import annotations

import hypothesis.strategies as st
import pytest
from hypothesis import given
from keysets import KeySet, UnorderableElementError, new, sorted_list


@pytest.mark.parametrize(
    "items",
    [
        ["a1", "a2", "a3"],
        ["a3", "a2", "a1"],
        ["a2", "a3", "a1", "a2"],
    ],
)
def test_sorted_list(items: list[str]):
    assert sorted_list(new(*items)) == ["a1", "a2", "a3"]


def test_sorted_list_empty():
    assert sorted_list(KeySet()) == []
    assert sorted_list(None) == []


@given(st.lists(st.integers()))
def test_sorted_list_ascending(items: list[int]):
    result = sorted_list(KeySet(items))
    assert result == sorted(set(items))
    assert all(a < b for a, b in zip(result, result[1:]))


@given(st.lists(st.text()), st.randoms())
def test_sorted_list_independent_of_insertion_order(items: list[str], random):
    shuffled = list(items)
    random.shuffle(shuffled)
    assert sorted_list(KeySet(items)) == sorted_list(KeySet(shuffled))


def test_sorted_list_does_not_mutate():
    key_set = new(3, 1, 2)
    sorted_list(key_set)
    assert key_set.unsorted_list() == [3, 1, 2]


def test_unorderable_elements():
    with pytest.raises(UnorderableElementError) as exc_info:
        sorted_list(new(1, "a"))
    assert "int" in str(exc_info.value)
    assert "str" in str(exc_info.value)
    assert isinstance(exc_info.value, TypeError)
