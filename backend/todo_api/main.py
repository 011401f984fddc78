"""Todo API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TodoServiceError -> HTTP responses
    - CORS configured from settings; defaults allow any origin, method and header
    - With a wildcard origin, every response carries Access-Control-Allow-Origin,
      even requests sent without an Origin header
    - The store starts empty on every startup and is cleared on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py: domain, validation, catch-all
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from todo_api.api.error_handlers import register_error_handlers
from todo_api.api.routes import health, todos
from todo_api.config import get_settings
from todo_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Server running on http://{settings.host}:{settings.port}")
    yield
    todos.get_todo_store().clear()
    logger.info("Todo API shutting down")


app = FastAPI(title="Todo API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def allow_any_origin(request: Request, call_next):
    """CORSMiddleware only answers requests that send Origin."""
    response = await call_next(request)
    if "*" in settings.cors_origins:
        response.headers.setdefault("access-control-allow-origin", "*")
    return response


app.include_router(health.router)
app.include_router(todos.router)

register_error_handlers(app)
