"""
AuditLog model for the application log trail.

Audit logs are APPEND-ONLY: there is no update path. Rows leave the table only
through the age-based retention purge.
"""

import enum
import uuid
from datetime import datetime
from typing import Any, Optional

from sqlalchemy import DateTime, ForeignKey, Index, String, Text, func, text
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column

from deskvault.models.base import Base


class LogLevel(str, enum.Enum):
    """
    Conventional severity levels.

    The level column is free-form; these are the values the desktop UI emits.
    """

    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"
    TRACE = "trace"


class AuditLog(Base):
    """
    AuditLog model for application log entries.

    Attributes:
        id: UUID primary key
        level: Severity level (free-form, e.g. "error", "info")
        message: Log message text
        log_metadata: Structured JSONB document (column "metadata", defaults to {})
        account_id: Owning account, set to NULL if the account is deleted
        created_at: When the entry was written (indexed for retention purges)

    The ORM attribute is log_metadata because "metadata" is reserved on
    declarative classes; the column itself is named "metadata".
    """

    __tablename__ = "audit_logs"

    level: Mapped[str] = mapped_column(String(20), nullable=False)

    message: Mapped[str] = mapped_column(Text, nullable=False)

    log_metadata: Mapped[dict[str, Any]] = mapped_column(
        "metadata",
        JSONB,
        nullable=False,
        default=dict,
        server_default=text("'{}'"),
    )

    account_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("accounts.id", ondelete="SET NULL"),
        nullable=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    __table_args__ = (
        Index("idx_audit_logs_level", "level"),
        Index("idx_audit_logs_created_at", "created_at"),
        Index("idx_audit_logs_account_id", "account_id"),
    )

    def __repr__(self) -> str:
        """String representation of AuditLog."""
        return (
            f"AuditLog(id={self.id}, level={self.level}, "
            f"account_id={self.account_id})"
        )
