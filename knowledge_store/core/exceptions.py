"""
Exception hierarchy for the knowledge store.

Provides layered exception structure for store-level errors.
All exceptions include context for observability and debugging.
Engine errors (sqlalchemy.exc.IntegrityError, OperationalError) are not
wrapped and reach callers unchanged.

Dependencies: None (pure domain layer)
System role: Centralized exception definitions across the package
"""

from typing import Any


class KnowledgeStoreException(Exception):
    """Base exception for all knowledge store errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(KnowledgeStoreException):
    """Raised when a required argument is missing or invalid, before any I/O."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Argument name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class KnowledgeFileNotFoundError(KnowledgeStoreException):
    """Raised when an update targets a file that is not in the store."""

    def __init__(self, file_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize file not found error.

        Args:
            file_id: ID of the missing file
            details: Additional context
        """
        details = details or {}
        details["file_id"] = file_id
        super().__init__(f"File with ID {file_id} does not exist", details)


class EmbeddingCodecError(KnowledgeStoreException):
    """Raised when a stored embedding blob cannot be decoded."""

    def __init__(self, message: str, byte_length: int | None = None) -> None:
        """
        Initialize embedding codec error.

        Args:
            message: Error message
            byte_length: Length of the offending blob
        """
        details = {}
        if byte_length is not None:
            details["byte_length"] = byte_length
        super().__init__(message, details)
