"""
Common model utilities.

Identifier and timestamp factories shared by every domain model, plus the
result type returned by remote mirror calls.

Dependencies: pydantic
System role: Shared model building blocks
"""

import uuid
from datetime import datetime, timezone
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


def new_id() -> str:
    """Generate a client-side record identifier (UUID4 string)."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class RemoteResult(BaseModel, Generic[T]):
    """
    Outcome of a single best-effort remote call.

    A remote mirror that cannot be reached is a routine condition, so it is
    reported as a value rather than raised.

    Attributes:
        ok: True when the remote call completed
        data: Returned payload (only meaningful when ok)
        error: Failure description when unavailable
        operation: Name of the remote operation for logging
    """

    ok: bool
    data: T | None = None
    error: str | None = None
    operation: str = Field(default="", description="Remote operation name")

    @classmethod
    def success(cls, data: T | None = None, operation: str = "") -> "RemoteResult[T]":
        """Build a successful result."""
        return cls(ok=True, data=data, operation=operation)

    @classmethod
    def unavailable(cls, error: str, operation: str = "") -> "RemoteResult[T]":
        """Build a result for an unreachable or failing remote."""
        return cls(ok=False, error=error, operation=operation)
