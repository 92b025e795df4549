"""
Application layer.

Use-case orchestration on top of the boundary and core layers: the sync
coordinator, chat and lab services, and the identity adapter.
"""
