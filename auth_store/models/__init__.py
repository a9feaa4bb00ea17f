"""Models for the auth-store service."""

from .config import DEFAULT_IDENTITY_URL, AuthStoreConfig, ValidationResult

__all__ = ["AuthStoreConfig", "ValidationResult", "DEFAULT_IDENTITY_URL"]
