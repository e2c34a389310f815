"""API Layer - FastAPI routes, middleware, envelope rendering and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every resource endpoint responds through api/envelope.py

Design Decisions:
    - Thin routes delegate to services; the envelope renderer is the only code
      that knows the response shape
"""
