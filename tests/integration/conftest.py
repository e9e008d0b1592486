"""
Fixtures for tests against a real PostgreSQL database.

Test modules here skip themselves unless TEST_DATABASE_URL is set. Tables are
migrated once per test and emptied before it runs.
"""

import pytest
import pytest_asyncio
from sqlalchemy import text

from deskvault.core.config import settings
from deskvault.core.database import DatabaseManager
from deskvault.core.migrations import run_migrations
from deskvault.services import AccountService, AuditLogService, DatabaseService


@pytest_asyncio.fixture
async def database():
    """Initialized, migrated, empty database."""
    manager = DatabaseManager(settings.test_database_url)
    engine = await manager.initialize()
    await run_migrations(engine)

    async with engine.begin() as conn:
        await conn.execute(text("TRUNCATE audit_logs, account_settings, accounts CASCADE"))

    yield manager

    await manager.close()


@pytest.fixture
def account_service(database):
    return AccountService(database)


@pytest.fixture
def audit_log_service(database):
    return AuditLogService(database)


@pytest.fixture
def database_service(database):
    return DatabaseService(database)
