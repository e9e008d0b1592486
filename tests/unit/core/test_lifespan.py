"""
Unit tests for startup bootstrapping.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from deskvault.core.database import DatabaseManager
from deskvault.core.exceptions import ConnectionFailureError, MigrationError
from deskvault.core.lifespan import bootstrap_database


@pytest.mark.asyncio
class TestBootstrapDatabase:
    """Startup failures leave the application running without a pool."""

    async def test_success_runs_migrations(self):
        database = MagicMock(spec=DatabaseManager)
        engine = MagicMock()
        database.initialize = AsyncMock(return_value=engine)

        with patch(
            "deskvault.core.lifespan.run_migrations", new_callable=AsyncMock
        ) as migrate:
            assert await bootstrap_database(database) is True

        migrate.assert_awaited_once_with(engine)

    async def test_malformed_url_stays_degraded(self):
        database = DatabaseManager("postgresql+asyncpg://u:p@localhost:notaport/db")

        with patch("deskvault.core.lifespan.logger") as mock_logger:
            assert await bootstrap_database(database) is False

        mock_logger.error.assert_called_once()
        assert database.is_initialized is False

    async def test_connection_failure_skips_migrations(self):
        database = MagicMock(spec=DatabaseManager)
        database.initialize = AsyncMock(side_effect=ConnectionFailureError("refused"))

        with patch(
            "deskvault.core.lifespan.run_migrations", new_callable=AsyncMock
        ) as migrate:
            assert await bootstrap_database(database) is False

        migrate.assert_not_awaited()

    async def test_migration_failure_stays_degraded(self):
        database = MagicMock(spec=DatabaseManager)
        database.initialize = AsyncMock(return_value=MagicMock())

        with patch(
            "deskvault.core.lifespan.run_migrations",
            new_callable=AsyncMock,
            side_effect=MigrationError("syntax error"),
        ):
            assert await bootstrap_database(database) is False
