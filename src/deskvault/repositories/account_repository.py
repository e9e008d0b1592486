"""
Account repository for account-specific database operations.

This module provides database operations for the Account model. It works
with full Account rows (password hash included); redaction to the public
view happens in AccountService before anything leaves the service layer.
"""

import uuid
from typing import Any

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from deskvault.core.exceptions import ConstraintViolationError
from deskvault.models.account import Account
from deskvault.repositories.base import BaseRepository


class AccountRepository(BaseRepository[Account]):
    """
    Repository for Account model operations.

    Extends BaseRepository with:
    - Newest-first listing
    - Active-account lookup by email (for authentication)
    - Partial updates with a dynamic SET clause
    - Hard delete reporting whether a row was removed
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize AccountRepository.

        Args:
            session: Async database session
        """
        super().__init__(Account, session)

    async def list_newest_first(self) -> list[Account]:
        """
        Get every account, most recently created first.

        Returns:
            List of Account instances
        """
        query = select(Account).order_by(Account.created_at.desc())

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_active_by_email(self, email: str) -> Account | None:
        """
        Get an active account by email address.

        Inactive accounts are invisible here, so they cannot authenticate.

        Args:
            email: Email address to search for

        Returns:
            Account instance or None if there is no active match

        Example:
            account = await account_repo.get_active_by_email("jane@example.com")
            if account is None:
                return None
        """
        query = (
            select(Account)
            .where(Account.email == email, Account.is_active.is_(True))
            .limit(1)
        )

        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def update_fields(
        self,
        account_id: uuid.UUID,
        changes: dict[str, Any],
    ) -> Account | None:
        """
        Write only the supplied columns and refresh updated_at.

        The SET clause is assembled from `changes`; columns not present keep
        their stored value. updated_at is always set, even when `changes`
        is empty.

        Args:
            account_id: UUID of the account
            changes: Column name to new value (e.g. {"username": "jane"})

        Returns:
            Updated Account instance, or None if no row has this ID

        Raises:
            ConstraintViolationError: If the new email/username is taken

        Example:
            account = await account_repo.update_fields(
                account_id, {"username": "new_name"}
            )
        """
        query = (
            update(Account)
            .where(Account.id == account_id)
            .values(**changes, updated_at=func.now())
            .returning(Account)
            .execution_options(synchronize_session=False)
        )

        try:
            result = await self.session.execute(query)
        except IntegrityError as e:
            raise ConstraintViolationError(f"Failed to update account: {e.orig}") from e
        return result.scalar_one_or_none()

    async def delete_by_id(self, account_id: uuid.UUID) -> bool:
        """
        Permanently delete an account.

        Dependent account_settings rows are removed by the ON DELETE CASCADE
        foreign key; audit_logs rows keep their content with account_id
        set to NULL.

        Args:
            account_id: UUID of the account

        Returns:
            True if a row was deleted, False if no row had this ID
        """
        query = (
            delete(Account)
            .where(Account.id == account_id)
            .execution_options(synchronize_session=False)
        )

        result = await self.session.execute(query)
        return result.rowcount > 0
