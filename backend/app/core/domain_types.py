"""Domain Types - identity types and resource kinds shared across layers.

Invariants:
    - Entity ids are strings assigned from the collection size, never UUIDs
    - ResourceKind values are the human-facing names used in error messages

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: values serialize to JSON and format directly into messages
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)
ProductId = NewType("ProductId", str)


# ─── Enums ───────────────────────────────────────────────────────

class ResourceKind(str, Enum):
    """Resource collections exposed by the API."""
    USER = "User"
    PRODUCT = "Product"
