"""In-Memory Store - ordered resource collections held in process memory.

Invariants:
    - Collections keep insertion order; remove() closes the gap
    - next_id() is str(len + 1): after a delete it can hand out an id that is
      still in use (kept for compatibility with existing clients)
    - list() returns a copy - callers cannot reorder the collection

Design Decisions:
    - Singleton store initialized on startup: FastAPI lifespan manages lifecycle
      (no global import side effects)
    - get_store is the injection point: tests override it with a fresh store
"""

import logging
from typing import Generic, Iterable, TypeVar

from app.models.product import Product
from app.models.user import User

logger = logging.getLogger(__name__)

E = TypeVar("E", User, Product)


class InMemoryCollection(Generic[E]):
    """One ordered collection, looked up by id with a linear scan."""

    def __init__(self, rows: Iterable[E] = ()):
        self._rows: list[E] = list(rows)

    def __len__(self) -> int:
        return len(self._rows)

    def list(self) -> list[E]:
        return list(self._rows)

    def get(self, entity_id: str) -> E | None:
        index = self._index_of(entity_id)
        return None if index is None else self._rows[index]

    def insert(self, entity: E) -> E:
        self._rows.append(entity)
        return entity

    def replace(self, entity_id: str, entity: E) -> E | None:
        index = self._index_of(entity_id)
        if index is None:
            return None
        self._rows[index] = entity
        return entity

    def remove(self, entity_id: str) -> bool:
        index = self._index_of(entity_id)
        if index is None:
            return False
        del self._rows[index]
        return True

    def next_id(self) -> str:
        return str(len(self._rows) + 1)

    def _index_of(self, entity_id: str) -> int | None:
        for index, row in enumerate(self._rows):
            if row.id == entity_id:
                return index
        return None


class InMemoryStore:
    """Owns the users and products collections."""

    def __init__(
        self, users: Iterable[User] = (), products: Iterable[Product] = (),
    ):
        self.users: InMemoryCollection[User] = InMemoryCollection(users)
        self.products: InMemoryCollection[Product] = InMemoryCollection(products)


def seed_users() -> list[User]:
    return [
        User(id="1", name="John Doe", email="john@example.com"),
        User(id="2", name="Jane Smith", email="jane@example.com"),
    ]


def seed_products() -> list[Product]:
    return [
        Product(id="1", name="Laptop", price=3500, category="Electronics", stock=10),
        Product(id="2", name="Gaming Mouse", price=150, category="Peripherals", stock=50),
        Product(
            id="3", name="Mechanical Keyboard", price=400,
            category="Peripherals", stock=30,
        ),
    ]


def build_seeded_store() -> InMemoryStore:
    """Fresh store holding the fixed sample rows."""
    return InMemoryStore(users=seed_users(), products=seed_products())


# Singleton (initialized on startup)
store: InMemoryStore | None = None


def init_store() -> InMemoryStore:
    global store
    store = build_seeded_store()
    logger.info(
        f"Store seeded with {len(store.users)} users "
        f"and {len(store.products)} products",
    )
    return store


def get_store() -> InMemoryStore:
    """FastAPI dependency for the resource store."""
    if store is None:
        raise RuntimeError("Store not initialized")
    return store
