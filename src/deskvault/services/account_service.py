"""
Account management service.

This module provides:
- Account listing and lookup
- Account creation with Argon2id password hashing
- Partial account updates
- Hard account deletion
- Credential verification (authenticate)

Every method returns the redacted AccountResponse view; the stored password
hash never leaves this module.
"""

import logging
import uuid

from deskvault.core.database import DatabaseManager
from deskvault.core.exceptions import InvalidIdentifierError, NotFoundError
from deskvault.core.security import (
    hash_password,
    simulate_password_verification,
    verify_password,
)
from deskvault.models.account import Account
from deskvault.repositories.account_repository import AccountRepository
from deskvault.schemas.account import (
    AccountCreate,
    AccountResponse,
    AccountUpdate,
    LoginRequest,
)

logger = logging.getLogger(__name__)


def parse_account_id(account_id: str | uuid.UUID) -> uuid.UUID:
    """
    Parse a caller-supplied account identifier.

    Args:
        account_id: UUID or its canonical string form

    Returns:
        Parsed UUID

    Raises:
        InvalidIdentifierError: If the value is not a valid UUID
    """
    if isinstance(account_id, uuid.UUID):
        return account_id
    try:
        return uuid.UUID(account_id)
    except (ValueError, TypeError, AttributeError) as e:
        raise InvalidIdentifierError(account_id) from e


class AccountService:
    """
    Service class for account operations.

    This service handles:
    - Account CRUD through AccountRepository
    - Password hashing on create and verification on authenticate
    - Redaction of stored rows into AccountResponse

    Each method runs in its own session, so each is one transaction.
    """

    def __init__(self, database: DatabaseManager):
        """
        Initialize AccountService.

        Args:
            database: Pool manager providing per-operation sessions
        """
        self.database = database

    async def list_accounts(self) -> list[AccountResponse]:
        """
        List every account, newest first.

        Returns:
            List of redacted accounts (empty list if there are none)
        """
        async with self.database.session() as session:
            accounts = await AccountRepository(session).list_newest_first()
            return [AccountResponse.model_validate(account) for account in accounts]

    async def get_account(self, account_id: str | uuid.UUID) -> AccountResponse | None:
        """
        Get a single account.

        Args:
            account_id: Account UUID (string form accepted)

        Returns:
            Redacted account, or None if no row has this ID

        Raises:
            InvalidIdentifierError: If account_id is not a UUID
        """
        parsed_id = parse_account_id(account_id)

        async with self.database.session() as session:
            account = await AccountRepository(session).get_by_id(parsed_id)
            if account is None:
                return None
            return AccountResponse.model_validate(account)

    async def create_account(self, data: AccountCreate) -> AccountResponse:
        """
        Create an account.

        The password is hashed with a fresh salt before the insert; the
        plaintext is never stored.

        Args:
            data: Account creation data

        Returns:
            Redacted view of the created account

        Raises:
            HashingError: If the password cannot be hashed
            ConstraintViolationError: If email or username is already taken
        """
        password_hash = hash_password(data.password)

        account = Account(
            email=data.email,
            username=data.username,
            password_hash=password_hash,
            first_name=data.first_name,
            last_name=data.last_name,
        )

        async with self.database.session() as session:
            account = await AccountRepository(session).add(account)
            response = AccountResponse.model_validate(account)

        logger.info(f"Account created: {response.id} ({response.username})")
        return response

    async def update_account(
        self,
        account_id: str | uuid.UUID,
        data: AccountUpdate,
    ) -> AccountResponse:
        """
        Apply a partial update.

        Only fields present (and non-null) in `data` are written; updated_at
        is refreshed even when nothing else changes.

        Args:
            account_id: Account UUID (string form accepted)
            data: Fields to change

        Returns:
            Redacted view of the updated account

        Raises:
            InvalidIdentifierError: If account_id is not a UUID
            NotFoundError: If no row has this ID
            ConstraintViolationError: If the new email or username is taken
        """
        parsed_id = parse_account_id(account_id)
        changes = data.changes()

        async with self.database.session() as session:
            account = await AccountRepository(session).update_fields(parsed_id, changes)
            if account is None:
                raise NotFoundError("Account")
            response = AccountResponse.model_validate(account)

        logger.info(f"Account updated: {parsed_id} (fields: {sorted(changes)})")
        return response

    async def delete_account(self, account_id: str | uuid.UUID) -> None:
        """
        Permanently delete an account.

        Args:
            account_id: Account UUID (string form accepted)

        Raises:
            InvalidIdentifierError: If account_id is not a UUID
            NotFoundError: If no row has this ID
        """
        parsed_id = parse_account_id(account_id)

        async with self.database.session() as session:
            deleted = await AccountRepository(session).delete_by_id(parsed_id)

        if not deleted:
            raise NotFoundError("Account")

        logger.info(f"Account deleted: {parsed_id}")

    async def authenticate(self, credentials: LoginRequest) -> AccountResponse | None:
        """
        Verify an email/password pair.

        An unknown email, an inactive account and a wrong password all yield
        None; callers cannot tell them apart.

        Args:
            credentials: Email and plaintext password

        Returns:
            Redacted account on success, otherwise None

        Raises:
            VerificationError: If the stored hash cannot be checked
        """
        async with self.database.session() as session:
            account = await AccountRepository(session).get_active_by_email(
                credentials.email
            )

        if account is None:
            simulate_password_verification(credentials.password)
            logger.info("Authentication failed: no active account for email")
            return None

        if not verify_password(credentials.password, account.password_hash):
            logger.info(f"Authentication failed: password mismatch for {account.id}")
            return None

        logger.info(f"Authentication succeeded: {account.id}")
        return AccountResponse.model_validate(account)
