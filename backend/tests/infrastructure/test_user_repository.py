"""SqlAlchemyUserRepository — round trips through SQLite and maps store failures.

Invariants:
    - save() without id inserts and returns the assigned id
    - save() with id updates in place
    - unique email violation -> InternalServerError("Failed to save user")
    - connection failure -> InternalServerError with the operation's message
"""

import pytest
from unittest.mock import patch
from sqlalchemy.exc import OperationalError

from user_api.core.domain_types import User, UserId
from user_api.core.errors import InternalServerError


def _ann() -> User:
    return User(name="Ann", email="ann@example.com", password="secret1")


async def test_save_inserts_and_assigns_id(user_repository):
    saved = await user_repository.save(_ann())
    assert saved.id is not None
    assert await user_repository.find_by_id(saved.id) == saved


async def test_find_by_email(user_repository):
    saved = await user_repository.save(_ann())
    assert await user_repository.find_by_email("ann@example.com") == saved
    assert await user_repository.find_by_email("nobody@example.com") is None


async def test_save_with_id_updates_row(user_repository):
    saved = await user_repository.save(_ann())
    saved.name = "Anna"
    updated = await user_repository.save(saved)
    assert updated.id == saved.id
    assert (await user_repository.find_by_id(saved.id)).name == "Anna"


async def test_delete_removes_row(user_repository):
    saved = await user_repository.save(_ann())
    await user_repository.delete(saved.id)
    assert await user_repository.find_by_id(saved.id) is None


async def test_duplicate_email_is_internal_error(user_repository):
    await user_repository.save(_ann())
    with pytest.raises(InternalServerError) as exc_info:
        await user_repository.save(_ann())
    assert exc_info.value.message == "Failed to save user"
    assert exc_info.value.operation == "commit"


async def test_update_of_vanished_row_is_internal_error(user_repository):
    ghost = User(id=UserId(404), name="G", email="g@example.com", password="secret1")
    with pytest.raises(InternalServerError):
        await user_repository.save(ghost)


async def test_operational_error_is_internal_error(user_repository):
    failure = OperationalError("SELECT", {}, Exception("connection refused"))
    with patch(
        "sqlalchemy.ext.asyncio.AsyncSession.get", side_effect=failure,
    ):
        with pytest.raises(InternalServerError) as exc_info:
            await user_repository.find_by_id(UserId(1))
    assert exc_info.value.message == "Failed to fetch user by ID"
    assert exc_info.value.http_status == 500


async def test_health_check(test_db_manager):
    assert await test_db_manager.health_check() is True


async def test_connection_refused_is_internal_error(user_repository):
    with patch(
        "sqlalchemy.ext.asyncio.AsyncSession.get",
        side_effect=ConnectionRefusedError(111, "Connection refused"),
    ):
        with pytest.raises(InternalServerError) as exc_info:
            await user_repository.find_by_id(UserId(1))
    assert exc_info.value.message == "Failed to fetch user by ID"
    assert exc_info.value.operation == "connect"


async def test_health_check_false_when_store_unreachable(test_db_manager):
    with patch(
        "sqlalchemy.ext.asyncio.AsyncSession.execute",
        side_effect=ConnectionRefusedError(111, "Connection refused"),
    ):
        assert await test_db_manager.health_check() is False


@pytest.mark.parametrize("user_id", [2**31, 2**63])
async def test_ids_beyond_column_range_miss_without_touching_store(
    user_repository, user_id,
):
    with patch("sqlalchemy.ext.asyncio.AsyncSession.get") as get:
        assert await user_repository.find_by_id(UserId(user_id)) is None
        await user_repository.delete(UserId(user_id))
    get.assert_not_called()
