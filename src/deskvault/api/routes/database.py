"""
Database lifecycle API routes.

This module provides:
- POST /database/initialize - Create the connection pool (idempotent)
- POST /database/migrations - Apply the schema (idempotent)
- GET /database/status - Connectivity and database identity
"""

from fastapi import APIRouter

from deskvault.api.dependencies import DatabaseServiceDep
from deskvault.schemas.common import MessageResponse
from deskvault.schemas.database import DatabaseStatus

router = APIRouter(prefix="/database", tags=["Database"])


@router.post(
    "/initialize",
    response_model=MessageResponse,
    summary="Initialize connection pool",
    responses={503: {"description": "Database unreachable"}},
)
async def initialize_database(database_service: DatabaseServiceDep) -> MessageResponse:
    """Create and verify the shared pool; a no-op once it exists."""
    message = await database_service.initialize_database()
    return MessageResponse(message=message)


@router.post(
    "/migrations",
    response_model=MessageResponse,
    summary="Run migrations",
    responses={
        500: {"description": "A schema statement failed; nothing was applied"},
        503: {"description": "Pool not initialized"},
    },
)
async def run_migrations(database_service: DatabaseServiceDep) -> MessageResponse:
    """Apply the schema in a single transaction."""
    message = await database_service.run_migrations()
    return MessageResponse(message=message)


@router.get(
    "/status",
    response_model=DatabaseStatus,
    summary="Check database connection",
)
async def check_database_connection(database_service: DatabaseServiceDep) -> DatabaseStatus:
    """
    Report connectivity and database identity.

    Always 200: failures are described in the `error` field.
    """
    return await database_service.check_database_connection()
