"""Product Handlers - filtered list, get, create, update, delete over products.

Invariants:
    - create requires truthy name, price, category and a stock key (0 allowed);
      a price of 0 counts as missing
    - price/stock are coerced with to_number; NaN is stored, never rejected
    - update: name/category overwrite only when truthy, price/stock whenever
      the key is present, so 0 is a valid override
"""

import logging
from dataclasses import replace

from app.core.coercion import is_truthy, to_number
from app.core.domain_types import ProductId, ResourceKind
from app.core.errors import not_found, validation_error
from app.core.product_filter import ProductFilter
from app.core.repository_protocols import CollectionRepository
from app.core.result import Result, Success, created, listed
from app.models.product import Product

logger = logging.getLogger(__name__)


class ProductHandlers:
    """CRUD handlers for products."""

    def __init__(self, products: CollectionRepository[Product]):
        self.products = products

    def list_products(self, criteria: ProductFilter | None = None) -> Result:
        products = self.products.list()
        if criteria is not None and not criteria.is_empty:
            products = [p for p in products if criteria.matches(p)]
        return listed(products)

    def get_product(self, product_id: str) -> Result:
        product = self.products.get(product_id)
        if product is None:
            return not_found(ResourceKind.PRODUCT)
        return Success(data=product)

    def create_product(self, fields: dict) -> Result:
        if not (
            is_truthy(fields.get("name"))
            and is_truthy(fields.get("price"))
            and is_truthy(fields.get("category"))
            and "stock" in fields
        ):
            return validation_error("All fields are required")

        product = Product(
            id=ProductId(self.products.next_id()),
            name=fields["name"],
            price=to_number(fields["price"]),
            category=fields["category"],
            stock=to_number(fields["stock"]),
        )
        self.products.insert(product)
        logger.info(
            f"Product {product.id} created", extra={"resource_id": product.id},
        )
        return created(product, "Product created successfully")

    def update_product(self, product_id: str, fields: dict) -> Result:
        current = self.products.get(product_id)
        if current is None:
            return not_found(ResourceKind.PRODUCT)

        updated = replace(
            current,
            name=fields["name"] if is_truthy(fields.get("name")) else current.name,
            price=to_number(fields["price"]) if "price" in fields else current.price,
            category=(
                fields["category"] if is_truthy(fields.get("category"))
                else current.category
            ),
            stock=to_number(fields["stock"]) if "stock" in fields else current.stock,
        )
        self.products.replace(product_id, updated)
        logger.info(
            f"Product {product_id} updated", extra={"resource_id": product_id},
        )
        return Success(data=updated, message="Product updated successfully")

    def delete_product(self, product_id: str) -> Result:
        if not self.products.remove(product_id):
            return not_found(ResourceKind.PRODUCT)
        logger.info(
            f"Product {product_id} deleted", extra={"resource_id": product_id},
        )
        return Success(message="Product deleted successfully")
