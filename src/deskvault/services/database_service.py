"""
Database lifecycle and status service.

This module provides:
- Pool initialization and migration commands with confirmation messages
- The connection status report (liveness plus database identity)
"""

import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from deskvault.core.database import DatabaseManager, ping_database
from deskvault.core.exceptions import PoolNotInitializedError
from deskvault.core.migrations import run_migrations
from deskvault.schemas.database import DatabaseStatus

logger = logging.getLogger(__name__)

INITIALIZED_MESSAGE = "Database initialized successfully"
MIGRATED_MESSAGE = "Migrations completed successfully"


class DatabaseService:
    """
    Service class for pool lifecycle commands and health reporting.
    """

    def __init__(self, database: DatabaseManager):
        """
        Initialize DatabaseService.

        Args:
            database: Pool manager to initialize, migrate, and probe
        """
        self.database = database

    async def initialize_database(self) -> str:
        """
        Initialize the shared pool (no-op if it already exists).

        Returns:
            Confirmation message

        Raises:
            ConnectionFailureError: If the database cannot be reached
        """
        await self.database.initialize()
        return INITIALIZED_MESSAGE

    async def run_migrations(self) -> str:
        """
        Apply the schema to the initialized pool.

        Returns:
            Confirmation message

        Raises:
            PoolNotInitializedError: If the pool has not been initialized
            MigrationError: If any schema statement fails
        """
        await run_migrations(self.database.get())
        return MIGRATED_MESSAGE

    async def check_database_connection(self) -> DatabaseStatus:
        """
        Report pool health and database identity.

        Connectivity and identity are reported separately. This method does
        not raise for database failures; they are returned in `error`.

        Returns:
            DatabaseStatus

        Example:
            status = await database_service.check_database_connection()
            if not status.connected:
                logger.warning(status.error)
        """
        try:
            engine = self.database.get()
        except PoolNotInitializedError as e:
            return DatabaseStatus(connected=False, error=e.message)

        try:
            await ping_database(engine)
        except (SQLAlchemyError, OSError) as e:
            logger.warning(f"Database liveness probe failed: {e}")
            return DatabaseStatus(connected=False, error=str(e))

        try:
            async with engine.connect() as conn:
                result = await conn.execute(text("SELECT current_database(), version()"))
                database_name, version = result.one()
        except (SQLAlchemyError, OSError) as e:
            logger.warning(f"Database identity query failed: {e}")
            return DatabaseStatus(connected=True, error=str(e))

        return DatabaseStatus(
            connected=True,
            database_name=database_name,
            version=version,
        )
