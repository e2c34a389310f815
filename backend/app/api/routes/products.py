"""Product Routes - /api/products CRUD endpoints with list filtering.

Invariants:
    - Query filters arrive as raw strings; coercion happens in ProductFilter
    - Every endpoint returns api.envelope.render(result)
    - Bodies may be JSON or urlencoded forms (api/request_body.py)
"""

from fastapi import APIRouter, Depends, Query

from app.api.envelope import render
from app.api.request_body import payload_fields
from app.core.product_filter import ProductFilter
from app.core.repository_protocols import ResourceStore
from app.infrastructure.memory_store import get_store
from app.schemas.product import ProductPayload
from app.services.handle_products import ProductHandlers

router = APIRouter(prefix="/api/products", tags=["products"])


def get_product_handlers(
    store: ResourceStore = Depends(get_store),
) -> ProductHandlers:
    return ProductHandlers(store.products)


read_product_fields = payload_fields(ProductPayload)


@router.get("")
async def list_products(
    category: str | None = Query(None),
    min_price: str | None = Query(None, alias="minPrice"),
    max_price: str | None = Query(None, alias="maxPrice"),
    handlers: ProductHandlers = Depends(get_product_handlers),
):
    """List products, optionally filtered by category and price range."""
    criteria = ProductFilter.from_query(category, min_price, max_price)
    return render(handlers.list_products(criteria))


@router.get("/{product_id}")
async def get_product(
    product_id: str, handlers: ProductHandlers = Depends(get_product_handlers),
):
    return render(handlers.get_product(product_id))


@router.post("")
async def create_product(
    fields: dict = Depends(read_product_fields),
    handlers: ProductHandlers = Depends(get_product_handlers),
):
    """Create a product (name, price, category, stock required). Responds 201."""
    return render(handlers.create_product(fields))


@router.put("/{product_id}")
async def update_product(
    product_id: str,
    fields: dict = Depends(read_product_fields),
    handlers: ProductHandlers = Depends(get_product_handlers),
):
    return render(handlers.update_product(product_id, fields))


@router.delete("/{product_id}")
async def delete_product(
    product_id: str, handlers: ProductHandlers = Depends(get_product_handlers),
):
    return render(handlers.delete_product(product_id))
