"""Todo Schemas - request bodies and the public record shape.

Invariants:
    - TodoCreate requires both title (str) and completed (bool)
    - TodoUpdate fields are optional; None means "leave unchanged"
    - Strict types: no coercion of "true" to bool or 1 to str
    - TodoResponse.created_at serializes as ISO-8601 UTC

Design Decisions:
    - StrictStr/StrictBool over lax mode: a wrong type is a malformed request (400)
    - extra fields ignored, not rejected: clients may send the full record back on PUT
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr

from todo_api.core.domain_types import TodoItem


class TodoCreate(BaseModel):
    """Body of POST /todos."""
    title: StrictStr
    completed: StrictBool


class TodoUpdate(BaseModel):
    """Body of PUT /todos/{id}. Only supplied fields are replaced."""
    title: StrictStr | None = None
    completed: StrictBool | None = None


class TodoResponse(BaseModel):
    """Public record shape returned in every todo array."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    completed: bool
    created_at: datetime

    @classmethod
    def from_items(cls, items: list[TodoItem]) -> list["TodoResponse"]:
        return [cls.model_validate(item) for item in items]
