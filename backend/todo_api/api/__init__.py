"""API Layer - FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Successful todo endpoints return the full JSON record array

Design Decisions:
    - Thin routes delegate every read and mutation to TodoStore
"""
