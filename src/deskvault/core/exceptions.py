"""
Custom exception classes for deskvault.

This module defines a hierarchy of custom exceptions that map to HTTP status codes
and provide consistent, human-readable failures across the operation surface.

Exception hierarchy:
    AppException (base)
    ├── DatabaseUnavailableError (503)
    │   ├── PoolNotInitializedError
    │   └── ConnectionFailureError
    ├── MigrationError (500)
    ├── ResourceError
    │   ├── NotFoundError (404)
    │   └── ConstraintViolationError (409)
    ├── InvalidIdentifierError (422)
    └── CredentialError (500)
        ├── HashingError
        └── VerificationError

An authentication mismatch is NOT an exception: it is a successful None result.
"""

from typing import Any


class AppException(Exception):
    """
    Base exception class for all application exceptions.

    Attributes:
        status_code: HTTP status code for the error
        error_code: Machine-readable error code
        message: Human-readable error message
        details: Optional additional error details
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str = "INTERNAL_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for JSON response.

        Returns:
            Dictionary with error information
        """
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# =============================================================================
# Database Availability Errors (503 Service Unavailable)
# =============================================================================


class DatabaseUnavailableError(AppException):
    """Base class for failures reaching the database."""

    def __init__(
        self,
        message: str = "Database not available",
        error_code: str = "DATABASE_UNAVAILABLE",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=503,
            error_code=error_code,
            details=details,
        )


class PoolNotInitializedError(DatabaseUnavailableError):
    """Raised when an operation runs before the connection pool exists."""

    def __init__(
        self,
        message: str = "Database pool not initialized",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="POOL_NOT_INITIALIZED",
            details=details,
        )


class ConnectionFailureError(DatabaseUnavailableError):
    """Raised on network or authentication failures reaching the store."""

    def __init__(
        self,
        message: str = "Failed to connect to the database",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code="CONNECTION_FAILURE",
            details=details,
        )


# =============================================================================
# Migration Errors (500 Internal Server Error)
# =============================================================================


class MigrationError(AppException):
    """Raised when the schema batch fails; nothing from the batch is committed."""

    def __init__(
        self,
        message: str = "Migration failed",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=500,
            error_code="MIGRATION_FAILED",
            details=details,
        )


# =============================================================================
# Resource Errors
# =============================================================================


class ResourceError(AppException):
    """Base class for resource-related errors."""

    def __init__(
        self,
        message: str,
        status_code: int,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=status_code,
            error_code=error_code,
            details=details,
        )


class NotFoundError(ResourceError):
    """Raised when an operation targets a nonexistent row."""

    def __init__(
        self,
        resource: str = "Resource",
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        if message is None:
            message = f"{resource} not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class ConstraintViolationError(ResourceError):
    """Raised on uniqueness or foreign-key conflicts."""

    def __init__(
        self,
        message: str = "Constraint violation",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONSTRAINT_VIOLATION",
            details=details,
        )


# =============================================================================
# Validation Errors (422 Unprocessable Entity)
# =============================================================================


class InvalidIdentifierError(AppException):
    """Raised when a caller supplies a malformed identifier."""

    def __init__(
        self,
        value: str | None = None,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        if message is None:
            message = f"Invalid UUID: {value!r}" if value is not None else "Invalid UUID"
        super().__init__(
            message=message,
            status_code=422,
            error_code="INVALID_IDENTIFIER",
            details=details,
        )


# =============================================================================
# Credential Processing Errors (500 Internal Server Error)
# =============================================================================


class CredentialError(AppException):
    """Base class for password hashing/verification engine malfunctions."""

    def __init__(
        self,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=500,
            error_code=error_code,
            details=details,
        )


class HashingError(CredentialError):
    """Raised when a password cannot be hashed."""

    def __init__(
        self,
        message: str = "Failed to hash password",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, error_code="HASHING_ERROR", details=details)


class VerificationError(CredentialError):
    """Raised when a stored hash cannot be checked (never on a plain mismatch)."""

    def __init__(
        self,
        message: str = "Failed to verify password",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message=message, error_code="VERIFICATION_ERROR", details=details)
