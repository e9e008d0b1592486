"""
Core module for deskvault.

Exports the main configuration, database, and migration components.
"""

from deskvault.core.config import settings
from deskvault.core.database import DatabaseManager
from deskvault.core.migrations import run_migrations

__all__ = [
    # Config
    "settings",
    # Database
    "DatabaseManager",
    "run_migrations",
]
