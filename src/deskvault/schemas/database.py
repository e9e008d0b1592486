"""
Database status schema.
"""

from pydantic import Field

from deskvault.schemas.common import CamelModel


class DatabaseStatus(CamelModel):
    """
    Pool health and database identity.

    Connectivity and metadata availability are reported independently:
    connected=True with error set means the probe worked but the identity
    query did not.

    Attributes:
        connected: Whether the liveness probe succeeded
        database_name: Result of current_database()
        version: Result of version()
        error: Failure description, if any
    """

    connected: bool = Field(description="Liveness probe result")
    database_name: str | None = Field(default=None)
    version: str | None = Field(default=None)
    error: str | None = Field(default=None)
