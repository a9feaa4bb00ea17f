"""
auth-store - API key validation gateway.

This package answers whether an API key is currently valid for an account,
serving repeat lookups from a bounded LRU cache and falling back to a remote
identity provider on a miss.
"""

from typing import Optional

from .errors import (
    AuthStoreError,
    ConfigurationError,
    ConnectionError,
    IdentityRejectedError,
)
from .models.config import AuthStoreConfig, ValidationResult
from .services.identity import (
    AcceptAllOracle,
    IdentityOracle,
    RackspaceIdentityOracle,
    RejectAllOracle,
    create_identity_oracle,
)
from .services.key_cache import KeyCache
from .services.validator import ValidationService
from .utils.config_loader import load_config

__version__ = "0.1.0"
__license__ = "MIT"


class AuthStore:
    """
    Main auth-store class wiring configuration, key cache and identity oracle.

    One instance owns one key cache for its whole lifetime.
    """

    def __init__(self, config: AuthStoreConfig, oracle: Optional[IdentityOracle] = None):
        """
        Initialize AuthStore with configuration.

        Args:
            config: auth-store configuration
            oracle: Identity oracle; built from ``config.identity_backend`` when omitted
        """
        self.config = config
        self.cache = KeyCache(config.cache_size)
        self.oracle = oracle if oracle is not None else create_identity_oracle(config)
        self.validator = ValidationService(self.cache, self.oracle)
        self.initialized = False

    async def initialize(self) -> None:
        """
        Prepare the identity oracle (opens its HTTP client) and mark the store ready.

        Calling it again on an initialized store does nothing.
        """
        if self.initialized:
            return
        await self.oracle.initialize()
        self.initialized = True

    async def close(self) -> None:
        """Release the identity oracle's resources."""
        await self.oracle.close()
        self.initialized = False

    def is_initialized(self) -> bool:
        """Check if the store is initialized."""
        return self.initialized

    async def validate(self, account_name: str, api_key: str) -> ValidationResult:
        """Validate an API key for an account."""
        return await self.validator.validate(account_name, api_key)


__all__ = [
    "AuthStore",
    "AuthStoreConfig",
    "ValidationResult",
    "KeyCache",
    "ValidationService",
    "IdentityOracle",
    "RackspaceIdentityOracle",
    "AcceptAllOracle",
    "RejectAllOracle",
    "create_identity_oracle",
    "load_config",
    "AuthStoreError",
    "IdentityRejectedError",
    "ConnectionError",
    "ConfigurationError",
]
