"""
Integration tests for log filtering, paging and retention.
"""

import uuid

import pytest
import pytest_asyncio
from sqlalchemy import text

from deskvault.core.config import settings
from deskvault.core.exceptions import ConstraintViolationError
from deskvault.schemas.account import AccountCreate
from deskvault.schemas.audit import AuditLogCreate, LogFilter

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(not settings.test_database_url, reason="TEST_DATABASE_URL is not set"),
]


async def age_logs(database, days: int) -> None:
    async with database.get().begin() as conn:
        await conn.execute(
            text("UPDATE audit_logs SET created_at = now() - make_interval(days => :days)"),
            {"days": days},
        )


@pytest_asyncio.fixture
async def account(account_service):
    return await account_service.create_account(
        AccountCreate(email="jane@example.com", username="jane_doe", password="pw")
    )


@pytest.mark.asyncio
async def test_metadata_defaults_to_empty_object(audit_log_service):
    entry = await audit_log_service.create_log(AuditLogCreate(level="info", message="hi"))

    assert entry.metadata == {}
    assert entry.id is not None


@pytest.mark.asyncio
async def test_unknown_account_is_rejected(audit_log_service):
    with pytest.raises(ConstraintViolationError):
        await audit_log_service.create_log(
            AuditLogCreate(level="info", message="hi", account_id=uuid.uuid4())
        )


@pytest.mark.asyncio
async def test_filter_by_level_and_account(audit_log_service, account):
    await audit_log_service.log_error("boom", account_id=account.id)
    await audit_log_service.log_error("unowned boom")
    await audit_log_service.log_info("fine", account_id=account.id)

    errors = await audit_log_service.query_logs(LogFilter(level="error"))
    owned = await audit_log_service.query_logs(LogFilter(account_id=account.id))
    both = await audit_log_service.query_logs(
        LogFilter(level="error", account_id=account.id)
    )

    assert {entry.message for entry in errors} == {"boom", "unowned boom"}
    assert {entry.message for entry in owned} == {"boom", "fine"}
    assert [entry.message for entry in both] == ["boom"]


@pytest.mark.asyncio
async def test_newest_first_with_paging(audit_log_service):
    for i in range(5):
        await audit_log_service.log_debug(f"entry {i}")

    page = await audit_log_service.query_logs(LogFilter(limit=2, offset=1))

    assert [entry.message for entry in page] == ["entry 3", "entry 2"]


@pytest.mark.asyncio
async def test_hostile_level_is_treated_as_data(audit_log_service):
    await audit_log_service.log_info("kept")

    result = await audit_log_service.query_logs(LogFilter(level="info' OR '1'='1"))

    assert result == []


@pytest.mark.asyncio
async def test_purge_removes_only_old_entries(audit_log_service, database):
    await audit_log_service.log_info("old")
    await age_logs(database, 10)
    await audit_log_service.log_info("fresh")

    deleted = await audit_log_service.purge_logs_older_than(7)

    remaining = await audit_log_service.query_logs()
    assert deleted == 1
    assert [entry.message for entry in remaining] == ["fresh"]
    assert await audit_log_service.purge_logs_older_than(7) == 0
