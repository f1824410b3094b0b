"""
HTTP API Package

FastAPI application exposing the example models, the generic validator,
the markdown reference and the onboarding workflow.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
