import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from deskvault.core.config import settings
from deskvault.core.database import DatabaseManager
from deskvault.core.exceptions import ConnectionFailureError, MigrationError
from deskvault.core.migrations import run_migrations

logger = logging.getLogger(__name__)


async def bootstrap_database(database: DatabaseManager) -> bool:
    """
    Initialize the pool, then apply migrations.

    Failures are logged and swallowed so the application still starts; every
    database operation then reports the pool as unavailable until a manual
    POST /database/initialize succeeds.

    Returns:
        True if the pool is up and migrated
    """
    try:
        engine = await database.initialize()
        await run_migrations(engine)
    except (ConnectionFailureError, MigrationError) as e:
        logger.error(f"Database startup failed, continuing degraded: {e.message}")
        return False
    return True


# ============================================================================
# Lifespan Context Manager
# ============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):  # type: ignore
    """
    Lifespan context manager for startup and shutdown events.

    Handles:
    - DatabaseManager creation and storage in app.state
    - Pool initialization followed by migrations
    - Pool disposal on shutdown
    """
    logger.info(f"Starting {settings.app_name} v{settings.version}")
    logger.info(f"Environment: {settings.environment}")

    database = DatabaseManager()
    app.state.database = database

    if await bootstrap_database(database):
        logger.info("Database ready")

    yield

    # Cleanup on shutdown
    logger.info("Shutting down application")
    await database.close()
