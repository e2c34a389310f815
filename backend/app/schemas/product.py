"""Product Schemas - request bodies for product create/update.

Invariants:
    - Fields accept any JSON value; price/stock are coerced by the handlers
    - Only keys sent by the client are forwarded (model_dump(exclude_unset=True)),
      so an explicit stock of 0 or null is distinguishable from an absent one
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ProductPayload(BaseModel):
    """Body of POST/PUT /api/products."""
    model_config = ConfigDict(extra="ignore")

    name: Any = None
    price: Any = None
    category: Any = None
    stock: Any = None
