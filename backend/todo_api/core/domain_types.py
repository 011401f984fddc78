"""Domain Types - the todo record and its identity type.

Invariants:
    - TodoId wraps a UUID: never use a bare string id in domain logic
    - TodoItem.id and TodoItem.created_at never change after construction
    - created_at is always timezone-aware UTC

Design Decisions:
    - NewType over a wrapper class: zero runtime cost, full type-checker support
    - Plain dataclass (not Pydantic) in core: serialization belongs to schemas/
"""

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import NewType
from uuid import UUID


TodoId = NewType("TodoId", UUID)


def new_todo_id() -> TodoId:
    return TodoId(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class TodoItem:
    """A single task entry. Only title and completed are mutable."""

    title: str
    completed: bool
    id: TodoId = field(default_factory=new_todo_id)
    created_at: datetime = field(default_factory=utc_now)

    def snapshot(self) -> "TodoItem":
        """Detached copy, safe to hand out past the store lock."""
        return replace(self)
