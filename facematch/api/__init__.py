"""
API layer for the face match backend.

Exposes HTTP endpoints under /api/v1: the face search and lookup relays,
and the session actions (capture, select, view).
"""
