"""Todo Routes - list, create, update and delete over the shared store.

Invariants:
    - Request bodies and path ids validated by FastAPI/Pydantic before the store is touched
    - Every success returns 200 with the full updated record array
    - Unknown ids surface as TodoNotFoundError (404 plain text via error_handlers)
    - Handlers never await while the store lock is held (store methods are sync)

Design Decisions:
    - Module-level store: single-process uvicorn, state lost on restart by contract
    - Store injected through Depends(get_todo_store): tests override it per case
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status

from todo_api.core.todo_store import TodoStore
from todo_api.schemas.todo import TodoCreate, TodoResponse, TodoUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/todos", tags=["todos"])

_todo_store = TodoStore()


def get_todo_store() -> TodoStore:
    return _todo_store


@router.get(
    "", response_model=list[TodoResponse], status_code=status.HTTP_200_OK,
)
async def list_todos(store: TodoStore = Depends(get_todo_store)):
    """Return every todo in insertion order."""
    return TodoResponse.from_items(store.list())


@router.post(
    "", response_model=list[TodoResponse], status_code=status.HTTP_200_OK,
)
async def create_todo(
    body: TodoCreate, store: TodoStore = Depends(get_todo_store),
):
    """Create a todo and return the updated collection."""
    items = store.insert(body.title, body.completed)
    return TodoResponse.from_items(items)


@router.put("/{todo_id}", response_model=list[TodoResponse])
async def update_todo(
    todo_id: UUID,
    body: TodoUpdate,
    store: TodoStore = Depends(get_todo_store),
):
    """Replace the supplied fields of one todo."""
    items = store.update(todo_id, title=body.title, completed=body.completed)
    return TodoResponse.from_items(items)


@router.delete("/{todo_id}", response_model=list[TodoResponse])
async def delete_todo(
    todo_id: UUID, store: TodoStore = Depends(get_todo_store),
):
    items = store.delete(todo_id)
    return TodoResponse.from_items(items)
