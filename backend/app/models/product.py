"""Product Entity - a catalog item with price and stock.

Invariants:
    - price and stock hold whatever numeric coercion produced, NaN included
    - to_dict() returns stored values as-is; api.envelope writes NaN as null
"""

from dataclasses import dataclass
from typing import Any

from app.core.domain_types import ProductId


@dataclass
class Product:
    id: ProductId
    name: Any
    price: int | float
    category: Any
    stock: int | float

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "category": self.category,
            "stock": self.stock,
        }
