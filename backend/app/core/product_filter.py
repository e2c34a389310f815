"""Product Filter - query criteria for listing products.

Invariants:
    - Absent or empty criteria impose no constraint
    - Category matches case-insensitively and exactly (no substring match)
    - Price bounds are inclusive and compose with AND
    - A bound that coerces to NaN matches no product
"""

from dataclasses import dataclass

from app.core.coercion import is_truthy, to_number


@dataclass(frozen=True)
class ProductFilter:
    category: str | None = None
    min_price: int | float | None = None
    max_price: int | float | None = None

    @classmethod
    def from_query(
        cls,
        category: str | None = None,
        min_price: str | None = None,
        max_price: str | None = None,
    ) -> "ProductFilter":
        """Build a filter from raw query-string values."""
        return cls(
            category=str(category) if is_truthy(category) else None,
            min_price=to_number(min_price) if is_truthy(min_price) else None,
            max_price=to_number(max_price) if is_truthy(max_price) else None,
        )

    @property
    def is_empty(self) -> bool:
        return (
            self.category is None
            and self.min_price is None
            and self.max_price is None
        )

    def matches(self, product) -> bool:
        if (
            self.category is not None
            and str(product.category).lower() != self.category.lower()
        ):
            return False
        price = product.price
        if self.min_price is not None and not price >= self.min_price:
            return False
        if self.max_price is not None and not price <= self.max_price:
            return False
        return True
