"""
Account Pydantic schemas for request/response handling.

This module provides:
- Account creation and partial update schemas
- Login request schema
- The redacted public account view (AccountResponse)
"""

import uuid
from datetime import datetime

from pydantic import Field, field_validator
from pydantic.networks import validate_email

from deskvault.schemas.common import CamelModel


def _validate_username(value: str) -> str:
    if not value.replace("_", "").isalnum() or not value.isascii():
        raise ValueError(
            "Username can only contain letters, numbers, and underscores"
        )
    return value


def _validate_email_format(value: str) -> str:
    # Format check only; the address is stored and matched exactly as supplied
    validate_email(value)
    return value


class AccountCreate(CamelModel):
    """
    Schema for account creation.

    Attributes:
        email: Account email address (unique)
        username: Account username (unique, 3-50 characters)
        password: Plain text password; hashed before it reaches the database
        first_name: Optional first name
        last_name: Optional last name
    """

    email: str = Field(description="Account email address")
    username: str = Field(
        min_length=3,
        max_length=50,
        description="Account username (3-50 characters)",
    )
    password: str = Field(
        min_length=1,
        description="Plain text password",
        repr=False,
    )
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        """Validate username format."""
        return _validate_username(value)

    @field_validator("email")
    @classmethod
    def check_email_format(cls, value: str) -> str:
        """Validate email format, keeping the address as supplied."""
        return _validate_email_format(value)


class AccountUpdate(CamelModel):
    """
    Schema for updating an account.

    All fields are optional. Only fields that are explicitly set are written;
    omitted fields keep their stored value.

    Attributes:
        email: New email address
        username: New username
        first_name: New first name
        last_name: New last name
        is_active: New active flag
    """

    email: str | None = Field(default=None, description="New email address")
    username: str | None = Field(
        default=None,
        min_length=3,
        max_length=50,
        description="New username",
    )
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    is_active: bool | None = Field(default=None)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str | None) -> str | None:
        """Validate username format if provided."""
        if value is not None:
            return _validate_username(value)
        return value

    @field_validator("email")
    @classmethod
    def check_email_format(cls, value: str | None) -> str | None:
        """Validate email format if provided."""
        if value is not None:
            return _validate_email_format(value)
        return value

    def changes(self) -> dict[str, object]:
        """
        Return the fields to write.

        A field left out of the request, or sent as null, keeps its stored
        value.

        Returns:
            Mapping of column name to new value
        """
        return {
            field: value
            for field, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


class LoginRequest(CamelModel):
    """
    Schema for credential verification.

    Email is not format-validated here: a malformed address is simply an
    unknown account and must not be distinguishable from a wrong password.
    """

    email: str = Field(description="Account email address")
    password: str = Field(description="Plain text password", repr=False)


class AccountResponse(CamelModel):
    """
    Redacted public view of an account.

    Never carries password_hash or updated_at.

    Attributes:
        id: Account ID
        email: Email address
        username: Username
        first_name: First name
        last_name: Last name
        is_active: Whether the account may authenticate
        created_at: Creation timestamp
    """

    id: uuid.UUID
    email: str
    username: str
    first_name: str | None = None
    last_name: str | None = None
    is_active: bool
    created_at: datetime
