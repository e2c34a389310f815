"""User Handlers - list, get, create, update, delete over the users collection.

Invariants:
    - create requires truthy name and email; a failed create never mutates
    - update merges only truthy name/email; id and created_at are untouched
    - unknown ids produce not_found(USER), never an exception

Design Decisions:
    - Update builds a replacement entity (dataclasses.replace) and hands it to
      the collection: the stored object is swapped, never half-written
"""

import logging
from dataclasses import replace

from app.core.coercion import is_truthy
from app.core.domain_types import ResourceKind, UserId
from app.core.errors import not_found, validation_error
from app.core.repository_protocols import CollectionRepository
from app.core.result import Result, Success, created, listed
from app.models.user import User

logger = logging.getLogger(__name__)


class UserHandlers:
    """CRUD handlers for users."""

    def __init__(self, users: CollectionRepository[User]):
        self.users = users

    def list_users(self) -> Result:
        return listed(self.users.list())

    def get_user(self, user_id: str) -> Result:
        user = self.users.get(user_id)
        if user is None:
            return not_found(ResourceKind.USER)
        return Success(data=user)

    def create_user(self, fields: dict) -> Result:
        name, email = fields.get("name"), fields.get("email")
        if not is_truthy(name) or not is_truthy(email):
            return validation_error("Name and email are required")

        user = User(id=UserId(self.users.next_id()), name=name, email=email)
        self.users.insert(user)
        logger.info(f"User {user.id} created", extra={"resource_id": user.id})
        return created(user, "User created successfully")

    def update_user(self, user_id: str, fields: dict) -> Result:
        current = self.users.get(user_id)
        if current is None:
            return not_found(ResourceKind.USER)

        updated = replace(
            current,
            name=_pick_text(fields.get("name"), current.name),
            email=_pick_text(fields.get("email"), current.email),
        )
        self.users.replace(user_id, updated)
        logger.info(f"User {user_id} updated", extra={"resource_id": user_id})
        return Success(data=updated, message="User updated successfully")

    def delete_user(self, user_id: str) -> Result:
        if not self.users.remove(user_id):
            return not_found(ResourceKind.USER)
        logger.info(f"User {user_id} deleted", extra={"resource_id": user_id})
        return Success(message="User deleted successfully")


def _pick_text(new, old):
    return new if is_truthy(new) else old
