"""
Base repository with generic persistence operations.

This module provides a generic repository pattern for database operations.
Repositories receive the session of a single operation; they never commit
(DatabaseManager.session() does that) and never hold a session across calls.

Type Parameters:
    ModelType: The SQLAlchemy model class (e.g., Account)
"""

import uuid
from typing import Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from deskvault.core.exceptions import ConstraintViolationError
from deskvault.models.base import Base

# Type variable for the model class
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository for database operations.

    Type Parameters:
        ModelType: The SQLAlchemy model class

    Usage:
        class AccountRepository(BaseRepository[Account]):
            def __init__(self, session: AsyncSession):
                super().__init__(Account, session)
    """

    def __init__(self, model: type[ModelType], session: AsyncSession):
        """
        Initialize repository.

        Args:
            model: The SQLAlchemy model class
            session: Async database session
        """
        self.model = model
        self.session = session

    async def add(self, instance: ModelType) -> ModelType:
        """
        Persist a model instance.

        Args:
            instance: Model instance to persist

        Returns:
            Persisted model instance (with server defaults populated)

        Raises:
            ConstraintViolationError: On a uniqueness or foreign-key conflict
        """
        self.session.add(instance)
        try:
            await self.session.flush()
        except IntegrityError as e:
            raise ConstraintViolationError(
                f"Failed to create {self.model.__name__.lower()}: {e.orig}"
            ) from e
        await self.session.refresh(instance)
        return instance

    async def get_by_id(self, id: uuid.UUID) -> ModelType | None:
        """
        Get a record by ID.

        Args:
            id: UUID of the record

        Returns:
            Model instance or None if not found
        """
        query = select(self.model).where(self.model.id == id)

        result = await self.session.execute(query)
        return result.scalar_one_or_none()
