"""
Database connection pool management.

This module owns the one shared connection pool of the process: a SQLAlchemy
AsyncEngine over the asyncpg driver. DatabaseManager is an explicitly
constructed context object (created by the application lifespan and injected
into services) rather than a module-level global.

Lifecycle:
    manager = DatabaseManager()
    await manager.initialize()      # idempotent; publishes only a live pool
    engine = manager.get()          # fails fast before initialization
    async with manager.session() as session:
        ...                         # one connection, one transaction
    await manager.close()
"""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.exc import InterfaceError, OperationalError, SQLAlchemyError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import AsyncAdaptedQueuePool

from deskvault.core.config import settings
from deskvault.core.exceptions import ConnectionFailureError, PoolNotInitializedError

logger = logging.getLogger(__name__)

# Compiled-in pool bounds (not runtime-configurable)
MAX_CONNECTIONS = 10
ACQUIRE_TIMEOUT_SECONDS = 30.0


# -----------------------------------------------------------------------------
# Database Engine Configuration
# -----------------------------------------------------------------------------


def create_database_engine(database_url: str | None = None) -> AsyncEngine:
    """
    Create async database engine with a bounded connection pool.

    Args:
        database_url: Database URL. If None, uses settings.database_url

    Returns:
        Configured AsyncEngine instance (no connection is opened yet)

    Connection Pool Configuration:
        - pool_size: MAX_CONNECTIONS permanent connections, no overflow
        - pool_timeout: ACQUIRE_TIMEOUT_SECONDS to wait for a free connection
        - pool_pre_ping: Test connection before use
    """
    url = database_url or settings.database_url

    logger.info("Initializing database engine...")

    engine = create_async_engine(
        url,
        echo=settings.debug,  # Log SQL queries in debug mode
        echo_pool=settings.debug,  # Log connection pool events in debug mode
        pool_size=MAX_CONNECTIONS,
        max_overflow=0,
        pool_timeout=ACQUIRE_TIMEOUT_SECONDS,
        pool_pre_ping=True,
        poolclass=AsyncAdaptedQueuePool,
        connect_args={
            "server_settings": {
                "application_name": f"{settings.app_name} - {settings.environment}",
            },
        },
    )

    logger.info(
        f"Database engine created: max_connections={MAX_CONNECTIONS}, "
        f"acquire_timeout={ACQUIRE_TIMEOUT_SECONDS}s"
    )

    return engine


async def ping_database(engine: AsyncEngine) -> bool:
    """
    Run a trivial round-trip query against the pool.

    Args:
        engine: Engine to probe

    Returns:
        True if the database answered SELECT 1

    Raises:
        SQLAlchemyError, OSError: If the database cannot be reached
    """
    async with engine.connect() as conn:
        result = await conn.execute(text("SELECT 1"))
        return result.scalar_one() == 1


# -----------------------------------------------------------------------------
# Pool Manager
# -----------------------------------------------------------------------------


class DatabaseManager:
    """
    Owner of the shared connection pool.

    The engine slot goes from empty to set exactly once. The transition is
    guarded by an asyncio.Lock so a startup task and a manual retry cannot
    both build a pool; reads of the slot never wait on the lock.

    Attributes:
        database_url: Connection target resolved at construction time
    """

    def __init__(self, database_url: str | None = None):
        """
        Initialize the manager without connecting.

        Args:
            database_url: Database URL. If None, uses settings.database_url
        """
        self.database_url = database_url or settings.database_url
        self._engine: AsyncEngine | None = None
        self._sessionmaker: async_sessionmaker[AsyncSession] | None = None
        self._lock = asyncio.Lock()

    @property
    def is_initialized(self) -> bool:
        """Check whether a verified pool has been published."""
        return self._engine is not None

    async def initialize(self) -> AsyncEngine:
        """
        Create the pool, verify it, and publish it.

        Re-invocation after success is a no-op that returns the existing
        engine. A pool that fails its liveness probe is disposed and never
        published.

        Returns:
            The published AsyncEngine

        Raises:
            ConnectionFailureError: If the database cannot be reached
        """
        if self._engine is not None:
            return self._engine

        async with self._lock:
            # Another initializer may have won while we waited
            if self._engine is not None:
                return self._engine

            engine: AsyncEngine | None = None
            try:
                engine = create_database_engine(self.database_url)
                await ping_database(engine)
            except (SQLAlchemyError, OSError, ValueError) as e:
                if engine is not None:
                    await engine.dispose()
                logger.error(f"Failed to initialize database: {e}")
                raise ConnectionFailureError(f"Failed to initialize database: {e}") from e

            self._sessionmaker = async_sessionmaker(
                engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )
            self._engine = engine

        logger.info("Database pool initialized")
        return engine

    def get(self) -> AsyncEngine:
        """
        Return the published engine.

        Raises:
            PoolNotInitializedError: If initialize() has not succeeded yet
        """
        if self._engine is None:
            raise PoolNotInitializedError()
        return self._engine

    def get_sessionmaker(self) -> async_sessionmaker[AsyncSession]:
        """
        Return the session factory bound to the published engine.

        Raises:
            PoolNotInitializedError: If initialize() has not succeeded yet
        """
        if self._sessionmaker is None:
            raise PoolNotInitializedError()
        return self._sessionmaker

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Open a session for one repository operation.

        Commits when the block exits cleanly and rolls back otherwise.
        Connection-level driver failures surface as ConnectionFailureError.

        Yields:
            AsyncSession holding at most one pooled connection

        Raises:
            PoolNotInitializedError: If initialize() has not succeeded yet
            ConnectionFailureError: If the database connection fails mid-operation

        Example:
            async with manager.session() as session:
                account = await AccountRepository(session).get_by_id(account_id)
        """
        sessionmaker = self.get_sessionmaker()

        try:
            async with sessionmaker() as session:
                try:
                    yield session
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise
        except (OperationalError, InterfaceError, PoolTimeoutError, OSError) as e:
            logger.error(f"Database connection failure: {e}")
            raise ConnectionFailureError(f"Database connection failure: {e}") from e

    async def close(self) -> None:
        """
        Dispose of the pool on application shutdown.

        Safe to call when the pool was never initialized.
        """
        async with self._lock:
            engine = self._engine
            self._engine = None
            self._sessionmaker = None

        if engine is None:
            return

        try:
            await engine.dispose()
            logger.info("Database engine disposed successfully")
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Error disposing database engine: {e}")
            # Don't raise - we're shutting down anyway
