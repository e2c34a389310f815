"""Services Layer - resource handlers for users and products.

Invariants:
    - One handler class per resource, five operations each
    - Handlers return core.result values; they never build HTTP responses

Design Decisions:
    - Store collection injected through the constructor: handlers are testable
      without FastAPI
"""
