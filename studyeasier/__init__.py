"""
StudyEasier: local-first study assistant core.

Offline-first persistence of chats and generated study assets with a
best-effort Supabase mirror, plus Gemini-backed content generation.
"""

__version__ = "0.1.0"
