"""Error Hierarchy - typed, categorized exceptions for todo service failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) leave the store unchanged
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with TodoServiceError base: handlers dispatch on subclass
"""

from enum import Enum
from uuid import UUID


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


class TodoServiceError(Exception):
    """Base exception for all todo service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status


# ─── Domain Errors (400-level) ──────────────────────────────────

class TodoNotFoundError(TodoServiceError):
    """Update or delete targeted an id absent from the store."""

    # Exact body returned to clients (plain text, not a JSON envelope)
    MESSAGE = "Todo not found"

    def __init__(self, todo_id: UUID):
        super().__init__(
            self.MESSAGE, "TODO_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.todo_id = todo_id
