"""Infrastructure Layer - the resource store and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
"""
