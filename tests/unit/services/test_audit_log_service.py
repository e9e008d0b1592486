"""
Unit tests for AuditLogService.

All tests are fully mocked - no database or external dependencies.
"""

import uuid
from unittest.mock import AsyncMock, patch

import pytest

from deskvault.schemas.audit import AuditLogCreate, LogFilter
from deskvault.services.audit_log_service import AuditLogService


@pytest.fixture
def mock_audit_repo(audit_log_factory):
    """Create a mock AuditLogRepository whose add() fills server defaults."""
    repo = AsyncMock()

    async def fake_add(entry):
        template = audit_log_factory()
        entry.id = template.id
        entry.created_at = template.created_at
        return entry

    repo.add.side_effect = fake_add
    return repo


@pytest.fixture
def audit_log_service(mock_database, mock_audit_repo):
    """Create AuditLogService with a mocked repository."""
    with patch(
        "deskvault.services.audit_log_service.AuditLogRepository",
        return_value=mock_audit_repo,
    ):
        yield AuditLogService(mock_database)


def added_entry(mock_audit_repo):
    return mock_audit_repo.add.await_args.args[0]


class TestCreateLog:
    @pytest.mark.asyncio
    async def test_metadata_defaults_to_empty_object(self, audit_log_service, mock_audit_repo):
        result = await audit_log_service.create_log(
            AuditLogCreate(level="info", message="started")
        )

        assert added_entry(mock_audit_repo).log_metadata == {}
        assert result.metadata == {}
        assert result.account_id is None

    @pytest.mark.asyncio
    async def test_all_fields_are_stored(self, audit_log_service, mock_audit_repo):
        account_id = uuid.uuid4()

        result = await audit_log_service.create_log(
            AuditLogCreate(
                level="error",
                message="sync failed",
                metadata={"attempt": 3},
                account_id=account_id,
            )
        )

        entry = added_entry(mock_audit_repo)
        assert entry.level == "error"
        assert entry.log_metadata == {"attempt": 3}
        assert result.account_id == account_id


class TestConvenienceHelpers:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("helper", "level"),
        [("log_error", "error"), ("log_info", "info"), ("log_debug", "debug")],
    )
    async def test_helper_sets_level(self, audit_log_service, mock_audit_repo, helper, level):
        result = await getattr(audit_log_service, helper)("message", {"k": "v"})

        assert added_entry(mock_audit_repo).level == level
        assert result.level == level
        assert result.metadata == {"k": "v"}


class TestQueryLogs:
    @pytest.mark.asyncio
    async def test_default_filter(self, audit_log_service, mock_audit_repo):
        mock_audit_repo.query.return_value = []

        assert await audit_log_service.query_logs() == []

        log_filter = mock_audit_repo.query.await_args.args[0]
        assert log_filter.limit == 100
        assert log_filter.offset == 0

    @pytest.mark.asyncio
    async def test_returns_entry_views(self, audit_log_service, mock_audit_repo, audit_log_factory):
        mock_audit_repo.query.return_value = [
            audit_log_factory(level="error"),
            audit_log_factory(level="error"),
        ]

        results = await audit_log_service.query_logs(LogFilter(level="error"))

        assert [entry.level for entry in results] == ["error", "error"]


class TestPurge:
    @pytest.mark.asyncio
    async def test_returns_deleted_count(self, audit_log_service, mock_audit_repo):
        mock_audit_repo.purge_older_than.return_value = 12

        assert await audit_log_service.purge_logs_older_than(30) == 12
        mock_audit_repo.purge_older_than.assert_awaited_once_with(30)
