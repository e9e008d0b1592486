"""
Audit log Pydantic schemas for request/response handling.

This module provides:
- Log entry creation schema
- Log entry response schema
- LogFilter, the query-shaping parameters for filtered retrieval
"""

import uuid
from datetime import datetime
from typing import Any

from pydantic import AliasChoices, Field, field_validator

from deskvault.schemas.common import CamelModel

DEFAULT_LOG_LIMIT = 100
MAX_LOG_LIMIT = 1000


class AuditLogCreate(CamelModel):
    """
    Schema for appending a log entry.

    Attributes:
        level: Severity level (free-form, e.g. "error", "warn", "info")
        message: Log message text
        metadata: Structured context; defaults to an empty document
        account_id: Owning account, if any
    """

    level: str = Field(min_length=1, max_length=20, description="Severity level")
    message: str = Field(description="Log message")
    metadata: dict[str, Any] | None = Field(
        default=None,
        description="Structured context (defaults to {})",
    )
    account_id: uuid.UUID | None = Field(default=None, description="Owning account ID")


class AuditLogResponse(CamelModel):
    """
    Schema for a stored log entry.

    Attributes:
        id: Log entry ID
        level: Severity level
        message: Log message
        metadata: Structured context
        account_id: Owning account ID (null once the account is deleted)
        created_at: When the entry was written
    """

    id: uuid.UUID
    level: str
    message: str
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("log_metadata", "metadata"),
    )
    account_id: uuid.UUID | None = None
    created_at: datetime


class LogFilter(CamelModel):
    """
    Parameters that shape a filtered log query.

    Out-of-range paging values are clamped rather than rejected:
    limit into [1, MAX_LOG_LIMIT], offset to at least 0.

    Attributes:
        level: Only entries with exactly this level
        account_id: Only entries owned by this account
        limit: Page size (default 100)
        offset: Number of entries to skip (default 0)
    """

    level: str | None = Field(default=None, description="Filter by level")
    account_id: uuid.UUID | None = Field(default=None, description="Filter by account")
    limit: int = Field(default=DEFAULT_LOG_LIMIT, description="Page size (1-1000)")
    offset: int = Field(default=0, description="Entries to skip")

    @field_validator("limit", mode="before")
    @classmethod
    def clamp_limit(cls, value: Any) -> int:
        """Default a missing limit and clamp it into [1, MAX_LOG_LIMIT]."""
        if value is None:
            return DEFAULT_LOG_LIMIT
        return min(max(int(value), 1), MAX_LOG_LIMIT)

    @field_validator("offset", mode="before")
    @classmethod
    def floor_offset(cls, value: Any) -> int:
        """Default a missing offset and floor it at 0."""
        if value is None:
            return 0
        return max(int(value), 0)
