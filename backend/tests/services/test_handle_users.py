"""User Handlers - CRUD semantics over an isolated store, no HTTP.

Invariants:
    - create needs truthy name and email; failure leaves the collection untouched
    - update changes only truthy fields, never id or created_at
    - unknown ids are a NOT_FOUND failure with status 404
"""

import pytest

from app.core.errors import Failure, FailureKind
from app.core.result import Success
from app.services.handle_users import UserHandlers


@pytest.fixture
def handlers(store):
    return UserHandlers(store.users)


def test_list_users_returns_all_in_order_with_count(handlers):
    result = handlers.list_users()
    assert isinstance(result, Success)
    assert result.count == 2
    assert [u.id for u in result.data] == ["1", "2"]


def test_get_user_by_id(handlers):
    result = handlers.get_user("2")
    assert result.data.name == "Jane Smith"


def test_get_unknown_user_is_not_found(handlers):
    result = handlers.get_user("99")
    assert isinstance(result, Failure)
    assert result.kind is FailureKind.NOT_FOUND
    assert result.message == "User not found"
    assert result.status == 404


def test_create_user_assigns_next_id_and_timestamp(handlers, store):
    result = handlers.create_user({"name": "A", "email": "a@x.com"})
    assert result.status == 201
    assert result.message == "User created successfully"
    assert result.data.id == "3"
    assert result.data.created_at is not None
    assert store.users.get("3") is result.data


@pytest.mark.parametrize("fields", [
    {},
    {"name": "A"},
    {"email": "a@x.com"},
    {"name": "", "email": "a@x.com"},
    {"name": "A", "email": None},
    {"name": 0, "email": "a@x.com"},
])
def test_create_user_requires_name_and_email(handlers, store, fields):
    result = handlers.create_user(fields)
    assert isinstance(result, Failure)
    assert result.status == 400
    assert result.message == "Name and email are required"
    assert len(store.users) == 2


def test_get_after_create_returns_created_entity(handlers):
    created = handlers.create_user({"name": "A", "email": "a@x.com"}).data
    assert handlers.get_user(created.id).data == created


def test_update_user_changes_only_given_fields(handlers):
    before = handlers.get_user("1").data
    result = handlers.update_user("1", {"email": "new@example.com"})
    assert result.message == "User updated successfully"
    assert result.data.email == "new@example.com"
    assert result.data.name == before.name
    assert result.data.created_at == before.created_at
    assert result.data.id == "1"


def test_update_user_ignores_empty_strings(handlers):
    result = handlers.update_user("1", {"name": "", "email": None})
    assert result.data.name == "John Doe"
    assert result.data.email == "john@example.com"


def test_update_unknown_user_is_not_found(handlers):
    assert handlers.update_user("99", {"name": "x"}).status == 404


def test_delete_user_then_get_is_not_found(handlers):
    result = handlers.delete_user("1")
    assert result == Success(message="User deleted successfully")
    assert handlers.get_user("1").status == 404


def test_delete_unknown_user_is_not_found(handlers, store):
    assert handlers.delete_user("99").message == "User not found"
    assert len(store.users) == 2


def test_create_after_delete_reuses_id(handlers):
    """Id scheme is collection length + 1: deleting then creating can
    produce an id that is already taken. Preserved deliberately."""
    handlers.delete_user("1")
    created = handlers.create_user({"name": "A", "email": "a@x.com"}).data
    assert created.id == "2"
    assert [u.id for u in handlers.list_users().data] == ["2", "2"]
