"""
Unit tests for the migration runner and schema statements.
"""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import ProgrammingError

from deskvault.core.exceptions import MigrationError
from deskvault.core.migrations import run_migrations
from deskvault.core.schema import EXTENSIONS, INDEXES, SCHEMA_STATEMENTS, TABLES


@pytest.fixture
def conn():
    return AsyncMock()


@pytest.fixture
def engine(conn):
    engine = MagicMock()

    @asynccontextmanager
    async def begin():
        yield conn

    engine.begin.side_effect = begin
    return engine


def executed_sql(conn) -> list[str]:
    return [call.args[0].text for call in conn.execute.await_args_list]


class TestSchemaStatements:
    """The DDL batch is ordered and idempotent."""

    def test_every_statement_is_idempotent(self):
        for statement in SCHEMA_STATEMENTS:
            assert "IF NOT EXISTS" in statement

    def test_extension_then_tables_then_indexes(self):
        assert SCHEMA_STATEMENTS == EXTENSIONS + TABLES + INDEXES
        assert "uuid-ossp" in SCHEMA_STATEMENTS[0]

    def test_tables_declared_in_dependency_order(self):
        names = ["accounts", "account_settings", "audit_logs"]
        for name, statement in zip(names, TABLES):
            assert f"CREATE TABLE IF NOT EXISTS {name} " in statement

    @pytest.mark.parametrize(
        "index_name",
        [
            "idx_accounts_email",
            "idx_accounts_username",
            "idx_accounts_created_at",
            "idx_account_settings_account_id",
            "idx_audit_logs_level",
            "idx_audit_logs_created_at",
            "idx_audit_logs_account_id",
        ],
    )
    def test_index_present(self, index_name):
        assert any(index_name in statement for statement in INDEXES)


class TestRunMigrations:
    """Batch execution in a single transaction."""

    @pytest.mark.asyncio
    async def test_executes_every_statement_in_order(self, engine, conn):
        await run_migrations(engine)

        engine.begin.assert_called_once()
        assert executed_sql(conn) == list(SCHEMA_STATEMENTS)

    @pytest.mark.asyncio
    async def test_failure_raises_migration_error_with_driver_message(self, engine, conn):
        conn.execute.side_effect = [
            None,
            ProgrammingError("CREATE TABLE", None, Exception('syntax error at or near "TABEL"')),
        ]

        with pytest.raises(MigrationError) as exc_info:
            await run_migrations(engine)

        assert 'syntax error at or near "TABEL"' in exc_info.value.message
        assert exc_info.value.error_code == "MIGRATION_FAILED"
        # The batch stops at the failing statement
        assert conn.execute.await_count == 2

    @pytest.mark.asyncio
    async def test_custom_statement_batch(self, engine, conn):
        statements = ("CREATE TABLE IF NOT EXISTS t (id INT)",)

        await run_migrations(engine, statements)

        assert executed_sql(conn) == list(statements)
