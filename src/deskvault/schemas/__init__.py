"""
Pydantic schemas for deskvault.
"""

from deskvault.schemas.account import (
    AccountCreate,
    AccountResponse,
    AccountUpdate,
    LoginRequest,
)
from deskvault.schemas.audit import AuditLogCreate, AuditLogResponse, LogFilter
from deskvault.schemas.common import CamelModel, MessageResponse, PurgeResponse
from deskvault.schemas.database import DatabaseStatus

__all__ = [
    "CamelModel",
    "MessageResponse",
    "PurgeResponse",
    "AccountCreate",
    "AccountUpdate",
    "AccountResponse",
    "LoginRequest",
    "AuditLogCreate",
    "AuditLogResponse",
    "LogFilter",
    "DatabaseStatus",
]
