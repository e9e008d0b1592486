"""
API routes for deskvault.

This package contains all API endpoint definitions organized by feature.
"""

from deskvault.api.routes import accounts, database, health, logs

__all__ = ["accounts", "database", "health", "logs"]
