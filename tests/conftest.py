"""
Pytest configuration and fixtures for deskvault tests.

This module provides:
- Cheap Argon2 parameters for fast hashing in tests
- Mocked session / DatabaseManager fixtures for unit tests
- Account and log entry builders
"""

# Set environment variables BEFORE importing anything from deskvault
import os

os.environ["ARGON2_TIME_COST"] = "1"
os.environ["ARGON2_MEMORY_COST"] = "8"
os.environ["ARGON2_PARALLELISM"] = "1"

import uuid
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from deskvault.core.database import DatabaseManager
from deskvault.core.security import hash_password
from deskvault.models.account import Account
from deskvault.models.audit_log import AuditLog


# ============================================================================
# Unit Test Fixtures
# ============================================================================
@pytest.fixture
def mock_session():
    """Create a mock AsyncSession."""
    session = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def mock_database(mock_session):
    """
    Create a mock DatabaseManager whose session() yields mock_session.
    """
    database = MagicMock(spec=DatabaseManager)

    @asynccontextmanager
    async def session():
        yield mock_session

    database.session.side_effect = session
    return database


# ============================================================================
# Builders
# ============================================================================
def build_account(
    password: str = "correct horse",
    is_active: bool = True,
    **overrides,
) -> Account:
    """Build a detached Account row as the repository would return it."""
    now = datetime.now(UTC)
    values = {
        "id": uuid.uuid4(),
        "email": "jane@example.com",
        "username": "jane_doe",
        "password_hash": hash_password(password),
        "first_name": "Jane",
        "last_name": "Doe",
        "is_active": is_active,
        "created_at": now,
        "updated_at": now,
    }
    values.update(overrides)
    return Account(**values)


def build_audit_log(**overrides) -> AuditLog:
    """Build a detached AuditLog row as the repository would return it."""
    values = {
        "id": uuid.uuid4(),
        "level": "info",
        "message": "Application started",
        "log_metadata": {},
        "account_id": None,
        "created_at": datetime.now(UTC),
    }
    values.update(overrides)
    return AuditLog(**values)


@pytest.fixture
def account_factory():
    """Factory fixture for detached Account rows."""
    return build_account


@pytest.fixture
def audit_log_factory():
    """Factory fixture for detached AuditLog rows."""
    return build_audit_log
