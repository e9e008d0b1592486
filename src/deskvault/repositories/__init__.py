"""
Database repositories for deskvault.

This module exports all repository classes for database operations.
"""

from deskvault.repositories.account_repository import AccountRepository
from deskvault.repositories.audit_log_repository import AuditLogRepository, LogQueryBuilder
from deskvault.repositories.base import BaseRepository

__all__ = [
    "BaseRepository",
    "AccountRepository",
    "AuditLogRepository",
    "LogQueryBuilder",
]
