"""
FastAPI dependencies for service injection.

This module provides:
- The pool manager owned by the application lifespan
- Per-request service instances bound to that manager
"""

from typing import Annotated

from fastapi import Depends, Request

from deskvault.core.database import DatabaseManager
from deskvault.services import AccountService, AuditLogService, DatabaseService


def get_database_manager(request: Request) -> DatabaseManager:
    """
    Dependency to get the application's DatabaseManager.

    The manager is created by the lifespan and stored on app.state; it may
    not be initialized yet, in which case services raise
    PoolNotInitializedError.

    Args:
        request: Incoming request

    Returns:
        The shared DatabaseManager
    """
    return request.app.state.database


DatabaseManagerDep = Annotated[DatabaseManager, Depends(get_database_manager)]


def get_account_service(database: DatabaseManagerDep) -> AccountService:
    """
    Dependency to get AccountService instance.

    Usage:
        @router.get("/accounts")
        async def list_accounts(account_service: AccountServiceDep):
            return await account_service.list_accounts()
    """
    return AccountService(database)


def get_audit_log_service(database: DatabaseManagerDep) -> AuditLogService:
    """Dependency to get AuditLogService instance."""
    return AuditLogService(database)


def get_database_service(database: DatabaseManagerDep) -> DatabaseService:
    """Dependency to get DatabaseService instance."""
    return DatabaseService(database)


# Convenience type aliases for common dependencies
AccountServiceDep = Annotated[AccountService, Depends(get_account_service)]
AuditLogServiceDep = Annotated[AuditLogService, Depends(get_audit_log_service)]
DatabaseServiceDep = Annotated[DatabaseService, Depends(get_database_service)]
