"""
Integration tests for account persistence and authentication.
"""

import uuid

import pytest
from sqlalchemy import text

from deskvault.core.config import settings
from deskvault.core.exceptions import ConstraintViolationError, NotFoundError
from deskvault.schemas.account import AccountCreate, AccountUpdate, LoginRequest
from deskvault.schemas.audit import AuditLogCreate, LogFilter

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(not settings.test_database_url, reason="TEST_DATABASE_URL is not set"),
]


def new_account(**overrides) -> AccountCreate:
    values = {
        "email": "jane@example.com",
        "username": "jane_doe",
        "password": "correct horse",
        "first_name": "Jane",
        "last_name": "Doe",
    }
    values.update(overrides)
    return AccountCreate(**values)


@pytest.mark.asyncio
async def test_create_then_get(account_service):
    created = await account_service.create_account(new_account())

    fetched = await account_service.get_account(str(created.id))

    assert fetched == created
    assert created.is_active is True


@pytest.mark.asyncio
async def test_password_is_stored_hashed(account_service, database):
    created = await account_service.create_account(new_account())

    async with database.get().connect() as conn:
        result = await conn.execute(
            text("SELECT password_hash FROM accounts WHERE id = :id"), {"id": created.id}
        )
        stored = result.scalar_one()

    assert stored.startswith("$argon2id$")
    assert "correct horse" not in stored


@pytest.mark.asyncio
async def test_get_unknown_account_is_none(account_service):
    assert await account_service.get_account(str(uuid.uuid4())) is None


@pytest.mark.asyncio
async def test_list_newest_first(account_service):
    first = await account_service.create_account(new_account())
    second = await account_service.create_account(
        new_account(email="bob@example.com", username="bob")
    )

    listed = await account_service.list_accounts()

    assert [account.id for account in listed] == [second.id, first.id]


@pytest.mark.asyncio
async def test_duplicate_email_is_rejected(account_service):
    await account_service.create_account(new_account())

    with pytest.raises(ConstraintViolationError):
        await account_service.create_account(new_account(username="someone_else"))


@pytest.mark.asyncio
async def test_partial_update_keeps_other_fields(account_service, database):
    created = await account_service.create_account(new_account())

    updated = await account_service.update_account(
        str(created.id), AccountUpdate(first_name="Janet")
    )

    assert updated.first_name == "Janet"
    assert updated.last_name == "Doe"
    assert updated.username == "jane_doe"

    async with database.get().connect() as conn:
        result = await conn.execute(
            text("SELECT updated_at > created_at FROM accounts WHERE id = :id"),
            {"id": created.id},
        )
        assert result.scalar_one() is True


@pytest.mark.asyncio
async def test_update_unknown_account_raises(account_service):
    with pytest.raises(NotFoundError):
        await account_service.update_account(str(uuid.uuid4()), AccountUpdate(first_name="X"))


@pytest.mark.asyncio
async def test_update_to_taken_username_raises(account_service):
    await account_service.create_account(new_account())
    other = await account_service.create_account(
        new_account(email="bob@example.com", username="bob")
    )

    with pytest.raises(ConstraintViolationError):
        await account_service.update_account(str(other.id), AccountUpdate(username="jane_doe"))


@pytest.mark.asyncio
async def test_delete_account(account_service):
    created = await account_service.create_account(new_account())

    await account_service.delete_account(str(created.id))

    assert await account_service.get_account(str(created.id)) is None
    with pytest.raises(NotFoundError):
        await account_service.delete_account(str(created.id))


@pytest.mark.asyncio
async def test_delete_account_keeps_logs_unowned(account_service, audit_log_service):
    created = await account_service.create_account(new_account())
    await audit_log_service.create_log(
        AuditLogCreate(level="info", message="signed in", account_id=created.id)
    )

    await account_service.delete_account(str(created.id))

    logs = await audit_log_service.query_logs(LogFilter())
    assert len(logs) == 1
    assert logs[0].account_id is None
    assert logs[0].message == "signed in"


class TestAuthenticate:
    @pytest.mark.asyncio
    async def test_correct_password(self, account_service):
        created = await account_service.create_account(new_account())

        result = await account_service.authenticate(
            LoginRequest(email="jane@example.com", password="correct horse")
        )

        assert result.id == created.id

    @pytest.mark.asyncio
    async def test_mixed_case_email_round_trip(self, account_service):
        created = await account_service.create_account(new_account(email="Jane@Example.COM"))

        fetched = await account_service.get_account(str(created.id))
        result = await account_service.authenticate(
            LoginRequest(email="Jane@Example.COM", password="correct horse")
        )

        assert fetched.email == "Jane@Example.COM"
        assert result.id == created.id

    @pytest.mark.asyncio
    async def test_wrong_password(self, account_service):
        await account_service.create_account(new_account())

        result = await account_service.authenticate(
            LoginRequest(email="jane@example.com", password="battery staple")
        )

        assert result is None

    @pytest.mark.asyncio
    async def test_unknown_email(self, account_service):
        result = await account_service.authenticate(
            LoginRequest(email="ghost@example.com", password="correct horse")
        )

        assert result is None

    @pytest.mark.asyncio
    async def test_inactive_account(self, account_service):
        created = await account_service.create_account(new_account())
        await account_service.update_account(str(created.id), AccountUpdate(is_active=False))

        result = await account_service.authenticate(
            LoginRequest(email="jane@example.com", password="correct horse")
        )

        assert result is None
