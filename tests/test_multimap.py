from __future__ import annotations

from keysets import KeySet, delete_cleanup_last, insert_or_new, new


def test_insert_or_new():
    mapping: dict[str, KeySet[int]] = {}
    insert_or_new(mapping, "a", 1)
    insert_or_new(mapping, "a", 2)
    insert_or_new(mapping, "a", 1)
    insert_or_new(mapping, "b", 3)
    assert mapping == {"a": new(1, 2), "b": new(3)}


def test_insert_or_new_keeps_existing_set():
    existing = new(1)
    mapping = {"a": existing}
    insert_or_new(mapping, "a", 2)
    assert mapping["a"] is existing
    assert existing == {1, 2}


def test_delete_cleanup_last():
    mapping = {"a": new(1, 2), "b": new(3)}
    delete_cleanup_last(mapping, "a", 1)
    assert mapping == {"a": new(2), "b": new(3)}
    delete_cleanup_last(mapping, "a", 2)
    assert mapping == {"b": new(3)}
    delete_cleanup_last(mapping, "b", 4)
    assert mapping == {"b": new(3)}
    delete_cleanup_last(mapping, "missing", 1)
    assert mapping == {"b": new(3)}
