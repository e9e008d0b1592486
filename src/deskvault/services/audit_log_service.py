"""
Audit log service for the application log trail.

This module provides:
- Appending log entries
- Filtered, paged retrieval
- Age-based retention purge
- log_error / log_info / log_debug shorthands for internal callers
"""

import logging
import uuid
from typing import Any

from deskvault.core.database import DatabaseManager
from deskvault.models.audit_log import AuditLog, LogLevel
from deskvault.repositories.audit_log_repository import AuditLogRepository
from deskvault.schemas.audit import AuditLogCreate, AuditLogResponse, LogFilter

logger = logging.getLogger(__name__)


class AuditLogService:
    """
    Service class for audit log operations.

    Log entries are append-only: they are written, read, and eventually
    purged by age, but never edited.
    """

    def __init__(self, database: DatabaseManager):
        """
        Initialize AuditLogService.

        Args:
            database: Pool manager providing per-operation sessions
        """
        self.database = database

    async def create_log(self, data: AuditLogCreate) -> AuditLogResponse:
        """
        Append a log entry.

        Args:
            data: Level, message, optional metadata and owning account

        Returns:
            Stored entry (metadata is {} when none was supplied)

        Raises:
            ConstraintViolationError: If account_id references no account
        """
        audit_log = AuditLog(
            level=data.level,
            message=data.message,
            log_metadata=data.metadata if data.metadata is not None else {},
            account_id=data.account_id,
        )

        async with self.database.session() as session:
            audit_log = await AuditLogRepository(session).add(audit_log)
            response = AuditLogResponse.model_validate(audit_log)

        logger.debug(f"Log entry created: level={response.level}, account={response.account_id}")
        return response

    async def query_logs(self, log_filter: LogFilter | None = None) -> list[AuditLogResponse]:
        """
        Get log entries, newest first.

        Args:
            log_filter: Optional level/account predicates and paging
                (defaults to the first 100 entries, unfiltered)

        Returns:
            List of entries (empty list if nothing matches)
        """
        log_filter = log_filter or LogFilter()

        async with self.database.session() as session:
            logs = await AuditLogRepository(session).query(log_filter)
            return [AuditLogResponse.model_validate(log) for log in logs]

    async def purge_logs_older_than(self, days: int) -> int:
        """
        Delete entries older than `days` days.

        Args:
            days: Retention window in days

        Returns:
            Number of entries actually removed
        """
        async with self.database.session() as session:
            deleted = await AuditLogRepository(session).purge_older_than(days)

        logger.info(f"Purged {deleted} log entries older than {days} days")
        return deleted

    async def _log(
        self,
        level: LogLevel,
        message: str,
        metadata: dict[str, Any] | None,
        account_id: uuid.UUID | None,
    ) -> AuditLogResponse:
        return await self.create_log(
            AuditLogCreate(
                level=level.value,
                message=message,
                metadata=metadata,
                account_id=account_id,
            )
        )

    async def log_error(
        self,
        message: str,
        metadata: dict[str, Any] | None = None,
        account_id: uuid.UUID | None = None,
    ) -> AuditLogResponse:
        """Append an entry at level "error"."""
        return await self._log(LogLevel.ERROR, message, metadata, account_id)

    async def log_info(
        self,
        message: str,
        metadata: dict[str, Any] | None = None,
        account_id: uuid.UUID | None = None,
    ) -> AuditLogResponse:
        """Append an entry at level "info"."""
        return await self._log(LogLevel.INFO, message, metadata, account_id)

    async def log_debug(
        self,
        message: str,
        metadata: dict[str, Any] | None = None,
        account_id: uuid.UUID | None = None,
    ) -> AuditLogResponse:
        """Append an entry at level "debug"."""
        return await self._log(LogLevel.DEBUG, message, metadata, account_id)
