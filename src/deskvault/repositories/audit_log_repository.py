"""
AuditLog repository for the application log trail.

This module provides database operations for the AuditLog model.
Note: audit logs are APPEND-ONLY - this repository supports creation,
filtered reading, and the age-based retention purge, never updates.
"""

import logging
from typing import Any

from sqlalchemy import ColumnElement, Select, and_, delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from deskvault.core.exceptions import ConstraintViolationError
from deskvault.models.audit_log import AuditLog
from deskvault.schemas.audit import LogFilter

logger = logging.getLogger(__name__)


class LogQueryBuilder:
    """
    Builds the filtered audit log SELECT.

    Predicates are appended in call order and skipped when their value is
    None. The first predicate opens the WHERE clause and later ones are
    joined with AND. Every value is carried as a bound parameter; none is
    ever rendered into the SQL text.

    Example:
        query = (
            LogQueryBuilder()
            .where_equal(AuditLog.level, "error")
            .where_equal(AuditLog.account_id, None)  # skipped
            .build(limit=50, offset=0)
        )
        # SELECT ... FROM audit_logs WHERE audit_logs.level = $1
        # ORDER BY audit_logs.created_at DESC LIMIT $2 OFFSET $3
    """

    def __init__(self) -> None:
        self._conditions: list[ColumnElement[bool]] = []

    @property
    def has_conditions(self) -> bool:
        """Whether a WHERE clause will be emitted."""
        return bool(self._conditions)

    def where_equal(self, column: Any, value: Any) -> "LogQueryBuilder":
        """
        Append `column = :value` unless value is None.

        Args:
            column: Mapped column (e.g. AuditLog.level)
            value: Value to bind, or None to skip the predicate

        Returns:
            self, for chaining
        """
        if value is not None:
            self._conditions.append(column == value)
        return self

    def build(self, limit: int, offset: int) -> Select[tuple[AuditLog]]:
        """
        Produce the final statement, newest entries first.

        Args:
            limit: Page size (already clamped by LogFilter)
            offset: Entries to skip (already floored by LogFilter)

        Returns:
            SQLAlchemy select statement
        """
        query = select(AuditLog)

        if self._conditions:
            query = query.where(and_(*self._conditions))

        return (
            query.order_by(AuditLog.created_at.desc())
            .limit(limit)
            .offset(offset)
        )

    @classmethod
    def from_filter(cls, log_filter: LogFilter) -> Select[tuple[AuditLog]]:
        """
        Build the statement for a LogFilter.

        Args:
            log_filter: Level/account predicates and paging

        Returns:
            SQLAlchemy select statement
        """
        return (
            cls()
            .where_equal(AuditLog.level, log_filter.level)
            .where_equal(AuditLog.account_id, log_filter.account_id)
            .build(limit=log_filter.limit, offset=log_filter.offset)
        )


class AuditLogRepository:
    """
    Repository for AuditLog model operations.

    IMPORTANT: This repository does NOT extend BaseRepository because
    audit logs are append-only.

    Operations:
    - Append a log entry
    - Query entries with optional level/account filters and paging
    - Purge entries older than a number of days
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize AuditLogRepository.

        Args:
            session: Async database session
        """
        self.session = session

    async def add(self, instance: AuditLog) -> AuditLog:
        """
        Persist a new audit log entry.

        Args:
            instance: AuditLog instance to persist

        Returns:
            Persisted AuditLog instance (id and created_at populated)

        Raises:
            ConstraintViolationError: If account_id references no account
        """
        self.session.add(instance)
        try:
            await self.session.flush()
        except IntegrityError as e:
            raise ConstraintViolationError(f"Failed to create log: {e.orig}") from e
        await self.session.refresh(instance)
        return instance

    async def query(self, log_filter: LogFilter) -> list[AuditLog]:
        """
        Get log entries matching a filter, newest first.

        Args:
            log_filter: Optional level/account predicates plus limit/offset

        Returns:
            List of AuditLog instances

        Example:
            logs = await audit_repo.query(LogFilter(level="error", limit=20))
        """
        query = LogQueryBuilder.from_filter(log_filter)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def purge_older_than(self, days: int) -> int:
        """
        Delete entries created before now() minus `days` days.

        The cutoff uses the database clock. `days` is not range-checked: a
        negative value moves the cutoff into the future and can remove every
        row.

        Args:
            days: Retention window in days

        Returns:
            Number of rows actually deleted
        """
        if days < 0:
            logger.warning(
                f"Purging logs with negative retention window ({days} days): "
                "cutoff is in the future"
            )

        query = (
            delete(AuditLog)
            .where(AuditLog.created_at < func.now() - func.make_interval(0, 0, 0, days))
            .execution_options(synchronize_session=False)
        )

        result = await self.session.execute(query)
        return result.rowcount
