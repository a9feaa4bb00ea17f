"""
Validation service for API keys.

Decides whether an (account, key) pair is valid: the key cache answers first,
the identity oracle answers on a miss, and confirmed pairs are admitted into
the cache. Rejections are never cached.
"""

import logging

from ..models.config import ValidationResult
from .identity import IdentityOracle
from .key_cache import KeyCache

logger = logging.getLogger(__name__)


class ValidationService:
    """API key validation backed by a key cache and an identity oracle."""

    def __init__(self, cache: KeyCache, oracle: IdentityOracle):
        """
        Initialize validation service.

        Args:
            cache: Key cache shared by all requests
            oracle: Identity oracle consulted on cache misses
        """
        self.cache = cache
        self.oracle = oracle

    async def validate(self, account_name: str, api_key: str) -> ValidationResult:
        """
        Validate an API key for an account.

        Callers must reject empty account names and keys beforehand. Oracle
        failures of any kind yield INVALID; this method never raises.

        Args:
            account_name: Account identifier
            api_key: API key presented for the account

        Returns:
            ValidationResult.VALID or ValidationResult.INVALID
        """
        if self.cache.contains(account_name, api_key):
            logger.info(
                "Cached API key successfully validated.",
                extra={"account": account_name, "source": "cache"},
            )
            return ValidationResult.VALID

        try:
            accepted = await self.oracle.authenticate(account_name, api_key)
        except Exception as error:
            logger.warning(
                "Identity error.",
                extra={"account": account_name, "source": "identity", "err": str(error)},
            )
            return ValidationResult.INVALID

        if not accepted:
            logger.info(
                "Identity rejected API key.",
                extra={"account": account_name, "source": "identity"},
            )
            return ValidationResult.INVALID

        self.cache.add(account_name, api_key)
        logger.info(
            "API key successfully validated and cached.",
            extra={"account": account_name, "source": "identity"},
        )
        return ValidationResult.VALID
