"""
Common Pydantic schemas shared by the operation surface.

The desktop UI speaks camelCase; every schema here serializes with camelCase
aliases while still accepting snake_case field names from Python callers.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base schema with camelCase aliases.

    Attributes are snake_case in Python; JSON payloads use camelCase
    (e.g. first_name <-> "firstName").
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(CamelModel):
    """
    Human-readable confirmation for commands with no other result.

    Attributes:
        message: Confirmation text (e.g. "Migrations completed successfully")
    """

    message: str = Field(description="Confirmation message")


class PurgeResponse(MessageResponse):
    """
    Result of a retention purge.

    Attributes:
        message: Confirmation text
        deleted: Number of log entries actually removed
    """

    deleted: int = Field(ge=0, description="Number of rows removed")
