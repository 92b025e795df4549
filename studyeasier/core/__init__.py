"""
Core business logic module.

Contains domain business logic, exception hierarchy, and core components.
All business rules and domain-specific logic reside here.
"""

from studyeasier.core.exceptions import (
    StudyEasierException,
    ValidationError,
    LocalStoreError,
    GenerationError,
    SourceUnreadableError,
    GenerationServiceError,
    IdentityError,
    InvalidCredentialsError,
    EmailNotVerifiedError,
    AlreadyRegisteredError,
    IdentityServiceError,
)

__all__ = [
    "StudyEasierException",
    "ValidationError",
    "LocalStoreError",
    "GenerationError",
    "SourceUnreadableError",
    "GenerationServiceError",
    "IdentityError",
    "InvalidCredentialsError",
    "EmailNotVerifiedError",
    "AlreadyRegisteredError",
    "IdentityServiceError",
]
