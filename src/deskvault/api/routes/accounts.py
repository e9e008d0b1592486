"""
Account API routes.

This module provides:
- GET /accounts - List accounts (newest first)
- GET /accounts/{account_id} - Get account by ID
- POST /accounts - Create account
- PATCH /accounts/{account_id} - Partially update account
- DELETE /accounts/{account_id} - Delete account
- POST /accounts/authenticate - Verify email and password

Every response carries the redacted account view; password hashes are never
returned.
"""

import logging

from fastapi import APIRouter, status

from deskvault.api.dependencies import AccountServiceDep
from deskvault.core.exceptions import NotFoundError
from deskvault.schemas.account import (
    AccountCreate,
    AccountResponse,
    AccountUpdate,
    LoginRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/accounts", tags=["Accounts"])


@router.get(
    "",
    response_model=list[AccountResponse],
    summary="List accounts",
)
async def list_accounts(account_service: AccountServiceDep) -> list[AccountResponse]:
    """List every account, most recently created first."""
    return await account_service.list_accounts()


@router.post(
    "/authenticate",
    response_model=AccountResponse | None,
    summary="Verify credentials",
    description="""
    Verify an email/password pair against active accounts.

    Returns the account on a match and `null` otherwise. An unknown email, an
    inactive account and a wrong password are indistinguishable.
    """,
    responses={
        500: {"description": "Stored hash could not be verified"},
    },
)
async def authenticate(
    credentials: LoginRequest,
    account_service: AccountServiceDep,
) -> AccountResponse | None:
    return await account_service.authenticate(credentials)


@router.get(
    "/{account_id}",
    response_model=AccountResponse,
    summary="Get account by ID",
    responses={
        404: {"description": "Account not found"},
        422: {"description": "Invalid account ID"},
    },
)
async def get_account(
    account_id: str,
    account_service: AccountServiceDep,
) -> AccountResponse:
    """
    Get a single account.

    Path parameters:
        - account_id: UUID of the account
    """
    account = await account_service.get_account(account_id)
    if account is None:
        raise NotFoundError("Account")
    return account


@router.post(
    "",
    response_model=AccountResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create account",
    responses={
        409: {"description": "Email or username already exists"},
        422: {"description": "Validation error"},
    },
)
async def create_account(
    account_data: AccountCreate,
    account_service: AccountServiceDep,
) -> AccountResponse:
    """
    Create an account.

    The password is stored as an Argon2id hash.
    """
    return await account_service.create_account(account_data)


@router.patch(
    "/{account_id}",
    response_model=AccountResponse,
    summary="Update account",
    description="""
    Partially update an account.

    Only fields present in the body are written; omitted or null fields keep
    their stored value. `updatedAt` is always refreshed.
    """,
    responses={
        404: {"description": "Account not found"},
        409: {"description": "Email or username already exists"},
        422: {"description": "Invalid account ID or validation error"},
    },
)
async def update_account(
    account_id: str,
    update_data: AccountUpdate,
    account_service: AccountServiceDep,
) -> AccountResponse:
    return await account_service.update_account(account_id, update_data)


@router.delete(
    "/{account_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete account",
    description="""
    Permanently delete an account.

    The account's settings row is deleted with it; its log entries are kept
    with `accountId` cleared.
    """,
    responses={
        204: {"description": "Account deleted successfully"},
        404: {"description": "Account not found"},
        422: {"description": "Invalid account ID"},
    },
)
async def delete_account(
    account_id: str,
    account_service: AccountServiceDep,
) -> None:
    await account_service.delete_account(account_id)
