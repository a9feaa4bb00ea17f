"""HTTP surface for the auth-store service."""

from .app import create_app

__all__ = ["create_app"]
