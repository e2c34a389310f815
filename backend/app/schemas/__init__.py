"""Pydantic Schemas - request bodies for API endpoints.

Invariants:
    - Schemas parse at the system boundary; they do not enforce required fields

Design Decisions:
    - Separate from models: schemas are API contracts, models are stored entities
"""
