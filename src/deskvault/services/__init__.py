"""
Business logic services for deskvault.
"""

from deskvault.services.account_service import AccountService
from deskvault.services.audit_log_service import AuditLogService
from deskvault.services.database_service import DatabaseService

__all__ = [
    "AccountService",
    "AuditLogService",
    "DatabaseService",
]
