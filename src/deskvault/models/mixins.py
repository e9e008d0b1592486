"""
Reusable mixins for database models.

- TimestampMixin: created_at and updated_at timestamps
"""

from datetime import datetime

from sqlalchemy import DateTime, func
from sqlalchemy.orm import Mapped, mapped_column


class TimestampMixin:
    """
    Mixin to add timestamp columns to models.

    Adds:
    - created_at: Timestamp when record was created (set by the database)
    - updated_at: Timestamp when record was last updated

    Both are stamped by the database clock (CURRENT_TIMESTAMP), not by the
    application, so rows written by different processes order consistently.
    Repositories set updated_at explicitly on every UPDATE statement.
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
