"""User Handlers — registration, hashing, and duplicate-email rejection.

Invariants:
    - Stored password_hash is never the plain password and verifies against it
    - Duplicate email raises UniquenessViolationError and leaves exactly one row
"""

import pytest
from sqlalchemy import func, select

from marketplace.core.domain_types import UserRole
from marketplace.core.errors import UniquenessViolationError
from marketplace.infrastructure.passwords import get_password_context
from marketplace.models.user import User
from marketplace.schemas.user import CreateUserInput
from marketplace.services.handle_users import UserHandlers


def _input(**overrides) -> CreateUserInput:
    data = {
        "email": "parts.seller@example.com",
        "password": "testpassword123",
        "first_name": "Pat",
        "last_name": "Seller",
        "user_type": "seller",
        "phone": "555-0100",
        "city": "Austin",
    }
    data.update(overrides)
    return CreateUserInput(**data)


async def test_create_user_persists_row(test_db):
    user = await UserHandlers(test_db).create_user(_input())
    assert user.id is not None
    assert user.user_type == UserRole.SELLER
    assert user.phone == "555-0100"
    assert user.address is None


async def test_create_user_hashes_password(test_db):
    user = await UserHandlers(test_db).create_user(_input())
    assert user.password_hash != "testpassword123"
    context = get_password_context()
    assert context.verify("testpassword123", user.password_hash)
    assert not context.verify("wrongpassword", user.password_hash)


async def test_duplicate_email_rejected(test_db):
    handlers = UserHandlers(test_db)
    await handlers.create_user(_input())
    with pytest.raises(UniquenessViolationError) as exc_info:
        await handlers.create_user(_input(first_name="Other"))
    assert exc_info.value.http_status == 409

    count = await test_db.scalar(select(func.count()).select_from(User))
    assert count == 1


async def test_get_users_returns_all_roles(test_db, seller, buyer, provider):
    users = await UserHandlers(test_db).get_users()
    assert {u.user_type for u in users} == {
        UserRole.SELLER, UserRole.BUYER, UserRole.FINANCING_PROVIDER,
    }


async def test_get_users_empty(test_db):
    assert await UserHandlers(test_db).get_users() == []
