"""Root conftest - shared test configuration."""

import os

import pytest

from todo_api.core.todo_store import TodoStore

# Keep a developer's .env from changing log output or CORS during tests
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("CORS_ORIGINS", '["*"]')


@pytest.fixture
def store():
    """A fresh, empty store per test."""
    return TodoStore()
