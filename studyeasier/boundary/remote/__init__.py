"""
Remote boundary layer: Supabase client and the best-effort remote mirror.

Exports:
  - SupabaseClientProvider: Shared async Supabase client with init/close lifecycle
  - RemoteMirror: Chat and asset replica scoped by owning user

Dependencies: supabase, studyeasier.configs
System role: Cloud replica used for cross-device sync
"""

from studyeasier.boundary.remote.supabase_client import SupabaseClientProvider
from studyeasier.boundary.remote.remote_mirror import RemoteMirror

__all__ = ["RemoteMirror", "SupabaseClientProvider"]
