"""
Account and AccountSettings models.

This module defines:
- Account: user account with authentication and profile information
- AccountSettings: per-account preferences, one-to-one with Account

AccountSettings is mapped and migrated, but no repository operation reads or
writes it yet; it exists so deleting an account cascades correctly.
"""

import uuid
from typing import Any, Optional

from sqlalchemy import Boolean, ForeignKey, Index, String, text
from sqlalchemy.dialects.postgresql import JSONB, UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from deskvault.models.base import Base
from deskvault.models.mixins import TimestampMixin


# =============================================================================
# Account Model
# =============================================================================


class Account(Base, TimestampMixin):
    """
    Account model for authentication and profile management.

    Attributes:
        id: UUID primary key
        email: Unique email address
        username: Unique username
        password_hash: Argon2id hashed password (write-only from the outside)
        first_name: Optional first name
        last_name: Optional last name
        is_active: Inactive accounts cannot authenticate
        created_at: When the account was created
        updated_at: When the account was last updated

    Security:
        password_hash never leaves the repository layer; every read path
        converts the row into schemas.account.AccountResponse.
    """

    __tablename__ = "accounts"

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
    )

    username: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        unique=True,
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    first_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    last_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=text("true"),
    )

    settings: Mapped[Optional["AccountSettings"]] = relationship(
        back_populates="account",
        cascade="all, delete-orphan",
        passive_deletes=True,
        uselist=False,
    )

    __table_args__ = (
        Index("idx_accounts_email", "email"),
        Index("idx_accounts_username", "username"),
        Index("idx_accounts_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        """String representation of Account (no credentials)."""
        return f"Account(id={self.id}, username={self.username}, email={self.email})"


# =============================================================================
# AccountSettings Model
# =============================================================================


class AccountSettings(Base, TimestampMixin):
    """
    Per-account preferences.

    Attributes:
        account_id: Owning account (unique, cascade-deleted with it)
        theme: UI theme name (default "light")
        language: UI language code (default "en")
        notifications_enabled: Whether desktop notifications are shown
        settings_data: Free-form JSONB document for other preferences
    """

    __tablename__ = "account_settings"

    account_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )

    theme: Mapped[str] = mapped_column(
        String(20), nullable=False, default="light", server_default=text("'light'")
    )
    language: Mapped[str] = mapped_column(
        String(10), nullable=False, default="en", server_default=text("'en'")
    )
    notifications_enabled: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=text("true")
    )
    settings_data: Mapped[dict[str, Any]] = mapped_column(
        JSONB, nullable=False, default=dict, server_default=text("'{}'")
    )

    account: Mapped["Account"] = relationship(back_populates="settings")

    __table_args__ = (
        Index("idx_account_settings_account_id", "account_id"),
    )
