"""
Audit log API routes.

This module provides:
- POST /logs - Append a log entry
- GET /logs - Filtered, paged log retrieval (newest first)
- DELETE /logs?olderThanDays=N - Retention purge
"""

import logging
import uuid

from fastapi import APIRouter, Query, status

from deskvault.api.dependencies import AuditLogServiceDep
from deskvault.schemas.audit import AuditLogCreate, AuditLogResponse, LogFilter
from deskvault.schemas.common import PurgeResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/logs", tags=["Logs"])

# make_interval takes a PostgreSQL integer; the sign is not restricted
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


@router.post(
    "",
    response_model=AuditLogResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create log entry",
    responses={
        409: {"description": "accountId references no account"},
    },
)
async def create_log_entry(
    log_data: AuditLogCreate,
    audit_log_service: AuditLogServiceDep,
) -> AuditLogResponse:
    """Append a log entry. Metadata defaults to an empty object."""
    return await audit_log_service.create_log(log_data)


@router.get(
    "",
    response_model=list[AuditLogResponse],
    summary="Query log entries",
)
async def query_logs(
    audit_log_service: AuditLogServiceDep,
    level: str | None = Query(default=None, description="Exact level to match"),
    account_id: uuid.UUID | None = Query(
        default=None, alias="accountId", description="Owning account"
    ),
    limit: int | None = Query(default=None, description="Page size, clamped to 1-1000"),
    offset: int | None = Query(default=None, description="Entries to skip, floored at 0"),
) -> list[AuditLogResponse]:
    """
    Get log entries, newest first.

    Query parameters:
        - level: Only entries with this level
        - accountId: Only entries owned by this account
        - limit: Page size (default 100, clamped to [1, 1000])
        - offset: Entries to skip (default 0)
    """
    log_filter = LogFilter(
        level=level,
        account_id=account_id,
        limit=limit,
        offset=offset,
    )
    return await audit_log_service.query_logs(log_filter)


@router.delete(
    "",
    response_model=PurgeResponse,
    summary="Purge old log entries",
)
async def purge_logs(
    audit_log_service: AuditLogServiceDep,
    days: int = Query(
        alias="olderThanDays",
        ge=INT32_MIN,
        le=INT32_MAX,
        description="Retention window in days",
    ),
) -> PurgeResponse:
    """Delete entries created more than `olderThanDays` days ago."""
    deleted = await audit_log_service.purge_logs_older_than(days)
    return PurgeResponse(
        message=f"Deleted {deleted} log entries older than {days} days",
        deleted=deleted,
    )
