"""
Migration runner.

Applies core.schema against an initialized pool. Every statement is
idempotent, and the whole batch runs in one transaction: either all of it
commits or none of it does. Failures are not retried.
"""

import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from deskvault.core.exceptions import MigrationError
from deskvault.core.schema import SCHEMA_STATEMENTS

logger = logging.getLogger(__name__)


async def run_migrations(
    engine: AsyncEngine,
    statements: tuple[str, ...] = SCHEMA_STATEMENTS,
) -> None:
    """
    Apply the schema statements in a single transaction.

    Safe to call any number of times: after the first successful run,
    every statement is a no-op.

    Args:
        engine: Initialized engine (see DatabaseManager.get())
        statements: DDL batch to apply, in order

    Raises:
        MigrationError: If any statement fails; carries the driver message verbatim

    Example:
        await run_migrations(manager.get())
    """
    logger.info(f"Applying {len(statements)} schema statements")

    try:
        async with engine.begin() as conn:
            for statement in statements:
                await conn.execute(text(statement))
    except (SQLAlchemyError, OSError) as e:
        logger.error(f"Migration failed: {e}")
        raise MigrationError(f"Migration failed: {e}") from e

    logger.info("Migrations completed successfully")
