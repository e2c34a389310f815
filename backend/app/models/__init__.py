"""Entity Models - in-memory representations of the API resources.

Invariants:
    - One file per entity
    - to_dict() is the only place an entity is turned into its JSON shape
"""

from app.models.user import User  # noqa: F401
from app.models.product import Product  # noqa: F401
