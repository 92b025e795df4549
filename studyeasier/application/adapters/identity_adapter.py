"""
Identity adapter.

Wraps Supabase Auth and maps provider user records onto the application's
User model. The mapped user is cached in the local store so the rest of the
application has a stable partition key even when offline.

Dependencies: supabase, studyeasier.boundary
System role: Session and identity boundary
"""

import logging
from typing import Any

from supabase import AuthError

from studyeasier.boundary.db.local_store import LocalStore
from studyeasier.boundary.remote.supabase_client import SupabaseClientProvider
from studyeasier.core.exceptions import (
    AlreadyRegisteredError,
    EmailNotVerifiedError,
    IdentityError,
    IdentityServiceError,
    InvalidCredentialsError,
    LocalStoreError,
)
from studyeasier.models.user import AuthSession, User, UserPreferences

logger = logging.getLogger(__name__)

USERS = "users"


def map_provider_user(provider_user: Any) -> User:
    """
    Map a Supabase auth user onto User.

    Display name and preferences live in user_metadata.
    """
    metadata = getattr(provider_user, "user_metadata", None) or {}
    email = getattr(provider_user, "email", None) or ""
    return User(
        id=str(provider_user.id),
        name=metadata.get("name") or email.split("@")[0],
        email=email,
        preferences=UserPreferences.model_validate(metadata.get("preferences") or {}),
    )


def classify_auth_error(exc: Exception, email: str = "") -> IdentityError:
    """Map a provider auth error onto the identity error taxonomy."""
    code = str(getattr(exc, "code", "") or "").lower()
    text = str(getattr(exc, "message", "") or exc).lower()

    if code == "email_not_confirmed" or "email not confirmed" in text:
        return EmailNotVerifiedError(email)
    if code in ("user_already_exists", "email_exists") or "already registered" in text:
        return AlreadyRegisteredError(email)
    if code == "invalid_credentials" or "invalid login credentials" in text:
        return InvalidCredentialsError()
    return IdentityServiceError(
        "Authentication service error. Please try again.",
        {"error_type": type(exc).__name__, "code": code},
    )


class IdentityAdapter:
    """Login, signup, logout and session lookup against Supabase Auth."""

    def __init__(self, provider: SupabaseClientProvider, local_store: LocalStore) -> None:
        """
        Initialize identity adapter.

        Args:
            provider: Shared Supabase client provider
            local_store: Local store used to cache the signed-in user
        """
        self._provider = provider
        self._local_store = local_store

    async def _auth(self):
        client = await self._provider.init()
        if client is None:
            raise IdentityServiceError("Identity provider is not configured.")
        return client.auth

    async def _cache_user(self, user: User) -> None:
        try:
            await self._local_store.put(USERS, user.model_dump(mode="json"))
        except LocalStoreError as e:
            logger.error(f"{__name__}:_cache_user - Could not cache user {user.id}: {e}")

    async def get_current_session(self) -> AuthSession | None:
        """
        Return the active session, or None when signed out.

        Returns:
            AuthSession | None
        """
        if not self._provider.settings.is_configured:
            return None
        auth = await self._auth()
        try:
            session = await auth.get_session()
        except AuthError as e:
            logger.warning(f"{__name__}:get_current_session - Session lookup failed: {e}")
            return None
        if session is None or session.user is None:
            return None
        return AuthSession(user=map_provider_user(session.user), token=session.access_token)

    async def login(self, email: str, password: str) -> AuthSession:
        """
        Sign in with email and password.

        Raises:
            InvalidCredentialsError: Wrong email or password
            EmailNotVerifiedError: Account exists but email is unconfirmed
            IdentityServiceError: Provider failure
        """
        auth = await self._auth()
        try:
            response = await auth.sign_in_with_password({"email": email, "password": password})
        except AuthError as e:
            raise classify_auth_error(e, email) from e

        if response.session is None or response.user is None:
            raise EmailNotVerifiedError(email)

        user = map_provider_user(response.user)
        await self._cache_user(user)
        logger.info(f"{__name__}:login - User {user.id} signed in")
        return AuthSession(user=user, token=response.session.access_token)

    async def signup(self, name: str, email: str, password: str) -> User:
        """
        Register a new account. The email must be verified before login.

        Raises:
            AlreadyRegisteredError: Email already in use
            IdentityServiceError: Provider failure
        """
        auth = await self._auth()
        preferences = UserPreferences().model_dump(mode="json")
        try:
            response = await auth.sign_up(
                {
                    "email": email,
                    "password": password,
                    "options": {"data": {"name": name, "preferences": preferences}},
                }
            )
        except AuthError as e:
            raise classify_auth_error(e, email) from e

        if response.user is None:
            raise IdentityServiceError("Signup did not return a user.")
        # Supabase hides existing accounts behind a user with no identities
        if getattr(response.user, "identities", None) == []:
            raise AlreadyRegisteredError(email)

        user = map_provider_user(response.user)
        await self._cache_user(user)
        logger.info(f"{__name__}:signup - Registered user {user.id}, verification pending")
        return user

    async def update_preferences(self, user: User, preferences: UserPreferences) -> User:
        """
        Persist new preferences for the signed-in user.

        Raises:
            IdentityServiceError: Provider failure
        """
        auth = await self._auth()
        try:
            await auth.update_user({"data": {"preferences": preferences.model_dump(mode="json")}})
        except AuthError as e:
            raise classify_auth_error(e, user.email) from e
        updated = user.model_copy(update={"preferences": preferences})
        await self._cache_user(updated)
        return updated

    async def logout(self) -> None:
        """Sign out; a provider failure still clears the local session."""
        client = self._provider.client
        if client is None:
            return
        try:
            await client.auth.sign_out()
        except AuthError as e:
            logger.warning(f"{__name__}:logout - Remote sign-out failed: {e}")
