"""Schemas Layer - Pydantic models for API request and response validation.

Invariants:
    - All API input validated by Pydantic before reaching the store
    - Response models are the only place domain records become JSON

Design Decisions:
    - Separate from core/: Pydantic at the HTTP boundary, dataclasses inside
"""
