"""Supporting adapters."""

from .identity_adapter import IdentityAdapter, classify_auth_error, map_provider_user

__all__ = ["IdentityAdapter", "classify_auth_error", "map_provider_user"]
