"""Core Layer - pure domain logic, no IO, no framework imports.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - Failures are values (core/errors.py), never rendered here

Design Decisions:
    - Functional core separated from the FastAPI shell: handlers and tests
      exercise core without an HTTP client
"""
