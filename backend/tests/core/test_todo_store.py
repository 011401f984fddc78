"""Todo Store - tests for the locked in-memory record sequence.

Tests cover:
    - insert assigns fresh ids and timestamps, returns the full snapshot
    - update replaces only supplied fields
    - update/delete on unknown ids raise and leave the store untouched
    - delete preserves the relative order of the remaining records
    - snapshots are detached from the store
    - concurrent inserts from many threads lose no writes
    - mutations log only after the lock is released
"""

import logging
import threading
from datetime import datetime, timezone
from uuid import uuid4

import pytest

from todo_api.core.errors import TodoNotFoundError


def test_new_store_is_empty(store):
    assert store.list() == []
    assert len(store) == 0


def test_insert_returns_full_snapshot(store):
    store.insert("first", False)
    items = store.insert("second", True)
    assert [i.title for i in items] == ["first", "second"]
    assert [i.completed for i in items] == [False, True]


def test_insert_sets_id_and_timestamp(store):
    before = datetime.now(timezone.utc)
    items = store.insert("A", False)
    assert len(items) == 1
    item = items[0]
    assert item.title == "A"
    assert item.completed is False
    assert item.created_at >= before
    assert item.created_at.tzinfo is not None


def test_insert_ids_are_unique(store):
    for n in range(50):
        store.insert(f"todo {n}", n % 2 == 0)
    ids = [i.id for i in store.list()]
    assert len(set(ids)) == 50


def test_update_title_only_changes_title(store):
    original = store.insert("A", True)[0]
    updated = store.update(original.id, title="B")[0]
    assert updated.title == "B"
    assert updated.completed is True
    assert updated.id == original.id
    assert updated.created_at == original.created_at


def test_update_completed_only_changes_completed(store):
    original = store.insert("A", False)[0]
    updated = store.update(original.id, completed=True)[0]
    assert updated.completed is True
    assert updated.title == "A"


def test_update_with_no_fields_is_a_noop(store):
    original = store.insert("A", False)[0]
    assert store.update(original.id) == [original]


def test_update_unknown_id_raises_and_leaves_store_unchanged(store):
    store.insert("A", False)
    store.insert("B", True)
    before = store.list()
    missing = uuid4()
    with pytest.raises(TodoNotFoundError) as exc_info:
        store.update(missing, title="C")
    assert exc_info.value.todo_id == missing
    assert store.list() == before


def test_delete_removes_only_matching_record(store):
    store.insert("A", False)
    middle = store.insert("B", False)[1]
    store.insert("C", False)
    items = store.delete(middle.id)
    assert [i.title for i in items] == ["A", "C"]


def test_delete_unknown_id_raises_and_leaves_store_unchanged(store):
    store.insert("A", False)
    before = store.list()
    with pytest.raises(TodoNotFoundError):
        store.delete(uuid4())
    assert store.list() == before


def test_delete_twice_raises_second_time(store):
    item = store.insert("A", False)[0]
    assert store.delete(item.id) == []
    with pytest.raises(TodoNotFoundError):
        store.delete(item.id)


def test_snapshot_is_detached_from_store(store):
    item = store.insert("A", False)[0]
    item.title = "mutated outside"
    assert store.list()[0].title == "A"


def test_clear_empties_store(store):
    store.insert("A", False)
    store.clear()
    assert store.list() == []


def test_concurrent_inserts_lose_no_writes(store):
    store.insert("existing", False)
    barrier = threading.Barrier(100)

    def worker(n):
        barrier.wait()
        store.insert(f"todo {n}", False)

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(100)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    items = store.list()
    assert len(items) == 101
    assert len({i.id for i in items}) == 101


def test_mixed_operations_keep_ids_unique(store):
    store.insert("A", False)
    for n in range(20):
        items = store.insert(f"t{n}", False)
        if n % 3 == 0:
            items = store.delete(items[0].id)
        elif n % 3 == 1:
            items = store.update(items[-1].id, completed=True)
        ids = [i.id for i in items]
        assert len(ids) == len(set(ids))


def test_mutations_log_after_releasing_lock(store, caplog):
    lock_states = []

    class _LockStateHandler(logging.Handler):
        def emit(self, record):
            if record.name == "todo_api.core.todo_store":
                lock_states.append(store._lock.locked())

    handler = _LockStateHandler()
    logging.getLogger("todo_api.core.todo_store").addHandler(handler)
    try:
        with caplog.at_level(logging.INFO, logger="todo_api.core.todo_store"):
            item = store.insert("A", False)[0]
            store.update(item.id, title="B")
            store.delete(item.id)
    finally:
        logging.getLogger("todo_api.core.todo_store").removeHandler(handler)

    assert lock_states == [False, False, False]
    messages = [
        r.message for r in caplog.records
        if r.name == "todo_api.core.todo_store"
    ]
    assert messages == ["Todo created", "Todo updated", "Todo deleted"]
