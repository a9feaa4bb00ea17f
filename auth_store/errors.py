"""
Service exceptions and error handling.

This module defines custom exceptions for the auth-store service.
"""


class AuthStoreError(Exception):
    """Base exception for auth-store errors."""

    def __init__(
        self, message: str, status_code: int | None = None, error_body: dict | None = None
    ):
        """
        Initialize auth-store error.

        Args:
            message: Error message
            status_code: HTTP status code returned by the identity provider, if any
            error_body: Sanitized error response body (secrets masked)
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_body = error_body if error_body is not None else None


class IdentityRejectedError(AuthStoreError):
    """Raised when the identity provider refuses a credential."""

    pass


class ConnectionError(AuthStoreError):
    """Raised when the identity provider cannot be reached."""

    pass


class ConfigurationError(AuthStoreError):
    """Raised when configuration is invalid."""

    pass
