"""Boundary Protocols - contracts between the resource handlers and the store.

Invariants:
    - Handlers depend on these Protocols, never on a concrete store
    - Collections preserve insertion order; list() returns a snapshot copy
    - next_id() is str(len(collection) + 1), evaluated at call time

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Synchronous methods: the only implementation is in-process memory, and a
      mutation never spans an await point
"""

from typing import Protocol, TypeVar

E = TypeVar("E")


class CollectionRepository(Protocol[E]):
    """Contract for one ordered resource collection."""
    def list(self) -> list[E]: ...
    def get(self, entity_id: str) -> E | None: ...
    def insert(self, entity: E) -> E: ...
    def replace(self, entity_id: str, entity: E) -> E | None: ...
    def remove(self, entity_id: str) -> bool: ...
    def next_id(self) -> str: ...


class ResourceStore(Protocol):
    """Contract for the store that owns every collection."""
    users: CollectionRepository
    products: CollectionRepository
