"""
Database models for deskvault.

This module exports all SQLAlchemy models and the declarative base.
Import models from this module to ensure proper initialization.
"""

from deskvault.models.account import Account, AccountSettings
from deskvault.models.audit_log import AuditLog, LogLevel
from deskvault.models.base import Base
from deskvault.models.mixins import TimestampMixin

__all__ = [
    # Base
    "Base",
    # Mixins
    "TimestampMixin",
    # Account models
    "Account",
    "AccountSettings",
    # Audit models
    "AuditLog",
    "LogLevel",
]
