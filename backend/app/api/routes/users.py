"""User Routes - /api/users CRUD endpoints.

Invariants:
    - Every endpoint returns api.envelope.render(result)
    - A missing body is treated as an empty object; JSON and urlencoded
      forms are both accepted (api/request_body.py)
"""

from fastapi import APIRouter, Depends

from app.api.envelope import render
from app.api.request_body import payload_fields
from app.core.repository_protocols import ResourceStore
from app.infrastructure.memory_store import get_store
from app.schemas.user import UserPayload
from app.services.handle_users import UserHandlers

router = APIRouter(prefix="/api/users", tags=["users"])


def get_user_handlers(store: ResourceStore = Depends(get_store)) -> UserHandlers:
    return UserHandlers(store.users)


read_user_fields = payload_fields(UserPayload)


@router.get("")
async def list_users(handlers: UserHandlers = Depends(get_user_handlers)):
    """List all users in insertion order."""
    return render(handlers.list_users())


@router.get("/{user_id}")
async def get_user(
    user_id: str, handlers: UserHandlers = Depends(get_user_handlers),
):
    return render(handlers.get_user(user_id))


@router.post("")
async def create_user(
    fields: dict = Depends(read_user_fields),
    handlers: UserHandlers = Depends(get_user_handlers),
):
    """Create a user (name and email required). Responds 201."""
    return render(handlers.create_user(fields))


@router.put("/{user_id}")
async def update_user(
    user_id: str,
    fields: dict = Depends(read_user_fields),
    handlers: UserHandlers = Depends(get_user_handlers),
):
    """Partial update: omitted fields keep their values."""
    return render(handlers.update_user(user_id, fields))


@router.delete("/{user_id}")
async def delete_user(
    user_id: str, handlers: UserHandlers = Depends(get_user_handlers),
):
    return render(handlers.delete_user(user_id))
