"""
Exception hierarchy for the StudyEasier application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class StudyEasierException(Exception):
    """Base exception for all StudyEasier application errors."""

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


class ValidationError(StudyEasierException):
    """Raised when input validation fails."""

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
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class LocalStoreError(StudyEasierException):
    """Raised when the on-device store cannot be opened or written."""

    def __init__(
        self,
        message: str,
        table: str | None = None,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize local store error.

        Args:
            message: Error message
            table: Logical table involved (users, chats, assets)
            operation: Operation that failed (init, put, delete)
            details: Additional context
        """
        details = details or {}
        if table:
            details["table"] = table
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class GenerationError(StudyEasierException):
    """Base exception for content generation failures."""

    pass


class SourceUnreadableError(GenerationError):
    """Raised when source material cannot be processed (too large, unreadable, unreachable)."""

    def __init__(
        self,
        message: str,
        source_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize source unreadable error.

        Args:
            message: Error message
            source_name: File name or URL of the rejected source
            details: Additional context
        """
        details = details or {}
        if source_name:
            details["source_name"] = source_name
        super().__init__(message, details)


class GenerationServiceError(GenerationError):
    """Raised when the generation service is overloaded or failing transiently."""

    pass


class IdentityError(StudyEasierException):
    """Base exception for identity provider failures."""

    pass


class InvalidCredentialsError(IdentityError):
    """Raised when email/password do not match an account."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__("Invalid email or password.", details)


class EmailNotVerifiedError(IdentityError):
    """Raised when the account exists but its email is not yet confirmed."""

    def __init__(self, email: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["email"] = email
        super().__init__(f"Email not verified: {email}", details)


class AlreadyRegisteredError(IdentityError):
    """Raised on signup when an account with the email already exists."""

    def __init__(self, email: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["email"] = email
        super().__init__("An account with this email already exists.", details)


class IdentityServiceError(IdentityError):
    """Raised when the identity provider fails for reasons the user cannot fix."""

    pass
