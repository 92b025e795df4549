"""
User domain models.

Application-side view of an identity provider account.

Dependencies: pydantic
System role: User and session contracts
"""

from enum import Enum

from pydantic import BaseModel, Field

from studyeasier.models.chat import AIMode


class Theme(str, Enum):
    """UI theme preference."""

    DARK = "dark"
    LIGHT = "light"


class UserPreferences(BaseModel):
    """Mutable per-user preference bag."""

    theme: Theme = Theme.DARK
    default_mode: AIMode = AIMode.STUDY


class User(BaseModel):
    """Account as seen by the application (never carries credentials)."""

    id: str = Field(description="Opaque provider-issued identifier")
    name: str = Field(default="", description="Display name")
    email: str
    preferences: UserPreferences = Field(default_factory=UserPreferences)


class AuthSession(BaseModel):
    """Authenticated user together with the provider access token."""

    user: User
    token: str
