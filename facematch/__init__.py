"""
Face Match backend: root package.

This package contains the FastAPI app factory (main.py), API routes, the
session state machine, domain models, and the camera and HTTP gateways to
the remote face search and enrichment services.
"""
