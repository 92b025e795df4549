"""
Boundary layer for external system integrations.

Handles all interactions with storage and remote services: the on-device
SQLite store and the Supabase-hosted mirror and identity provider.
"""
