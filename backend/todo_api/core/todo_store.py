"""Todo Store - authoritative in-memory sequence of todo records.

Invariants:
    - Every public method runs entirely under one threading.Lock (linearizable)
    - The lock is never held across an await: all methods are synchronous
    - Logging happens after the lock is released
    - Record ids are unique for the lifetime of the store
    - Order is insertion order; delete preserves the relative order of the rest
    - Callers only ever receive snapshots: mutating them never touches the store
    - Failed lookups (TodoNotFoundError) leave content and order unchanged

Design Decisions:
    - One coarse lock over a plain list: all traffic serializes through it
    - Every mutation returns the full updated snapshot, matching the HTTP contract
    - New records are fully built before the list is touched
"""

from __future__ import annotations

import logging
import threading
from uuid import UUID

from todo_api.core.domain_types import TodoItem, new_todo_id
from todo_api.core.errors import TodoNotFoundError

logger = logging.getLogger(__name__)


class TodoStore:
    """Thread-safe ordered collection of TodoItem records."""

    def __init__(self):
        self._items: list[TodoItem] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def list(self) -> list[TodoItem]:
        """Snapshot of all records in store order."""
        with self._lock:
            return self._snapshot()

    def insert(self, title: str, completed: bool) -> list[TodoItem]:
        """Append a new record with a fresh id and timestamp."""
        with self._lock:
            taken = {item.id for item in self._items}
            todo_id = new_todo_id()
            while todo_id in taken:
                todo_id = new_todo_id()
            item = TodoItem(title=title, completed=completed, id=todo_id)
            self._items.append(item)
            items = self._snapshot()
        logger.info("Todo created", extra={"todo_id": str(todo_id)})
        return items

    def update(
        self,
        todo_id: UUID,
        title: str | None = None,
        completed: bool | None = None,
    ) -> list[TodoItem]:
        """Replace only the supplied fields of the matching record."""
        with self._lock:
            index = self._index_of(todo_id)
            if index is None:
                raise TodoNotFoundError(todo_id)
            item = self._items[index]
            if title is not None:
                item.title = title
            if completed is not None:
                item.completed = completed
            items = self._snapshot()
        logger.info("Todo updated", extra={"todo_id": str(todo_id)})
        return items

    def delete(self, todo_id: UUID) -> list[TodoItem]:
        """Remove the matching record, keeping the order of the rest."""
        with self._lock:
            index = self._index_of(todo_id)
            if index is None:
                raise TodoNotFoundError(todo_id)
            del self._items[index]
            items = self._snapshot()
        logger.info("Todo deleted", extra={"todo_id": str(todo_id)})
        return items

    def clear(self) -> None:
        with self._lock:
            self._items.clear()

    # Callers must hold self._lock

    def _index_of(self, todo_id: UUID) -> int | None:
        for index, item in enumerate(self._items):
            if item.id == todo_id:
                return index
        return None

    def _snapshot(self) -> list[TodoItem]:
        return [item.snapshot() for item in self._items]
