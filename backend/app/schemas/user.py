"""User Schemas - request bodies for user create/update.

Invariants:
    - Fields accept any JSON value; presence is checked by the handlers
    - Unknown keys are ignored
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class UserPayload(BaseModel):
    """Body of POST/PUT /api/users. Every field optional at this layer."""
    model_config = ConfigDict(extra="ignore")

    name: Any = None
    email: Any = None
