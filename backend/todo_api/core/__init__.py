"""Core Layer - pure domain logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
    - The todo store is the only shared mutable state in the process

Design Decisions:
    - Functional core separated from the FastAPI shell: store is testable without a client
"""
