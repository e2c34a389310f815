"""User Entity - a registered user of the storefront.

Invariants:
    - id is assigned once at creation and never changes
    - created_at is set at creation and never mutated by updates
    - JSON field names are camelCase (createdAt)
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from app.core.domain_types import UserId
from app.core.timestamps import to_iso, utc_now


@dataclass
class User:
    id: UserId
    name: Any
    email: Any
    created_at: datetime = field(default_factory=utc_now)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "createdAt": to_iso(self.created_at),
        }
