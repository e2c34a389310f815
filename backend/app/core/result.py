"""Handler Results - the value every resource handler returns.

Invariants:
    - A handler returns exactly one of Success or Failure, never raises for
      expected outcomes (missing fields, unknown ids)
    - Success.count is set only by list operations; Success.message only by
      create/update/delete

Design Decisions:
    - Plain union over a Result wrapper class: `match` / isinstance at the
      dispatch layer reads naturally and needs no helper methods
"""

from dataclasses import dataclass
from typing import Any

from app.core.errors import Failure


@dataclass(frozen=True)
class Success:
    """Successful handler outcome with optional envelope extras."""
    data: Any = None
    status: int = 200
    message: str | None = None
    count: int | None = None


Result = Success | Failure


def listed(items: list) -> Success:
    return Success(data=items, count=len(items))


def created(entity: Any, message: str) -> Success:
    return Success(data=entity, status=201, message=message)
