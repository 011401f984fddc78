"""Health Probe - liveness endpoint for process supervisors.

Invariants:
    - GET /health always returns 200 if the process is up
    - Never mutates the store
"""

from fastapi import APIRouter, Depends, status

from todo_api.api.routes.todos import get_todo_store
from todo_api.core.todo_store import TodoStore

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check(store: TodoStore = Depends(get_todo_store)):
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "todo-api",
        "version": "1.0.0",
        "todos": len(store),
    }
