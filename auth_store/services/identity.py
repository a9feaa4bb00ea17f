"""
Identity oracles.

An identity oracle answers one question: does this API key belong to this
account? ``RackspaceIdentityOracle`` asks Rackspace Identity; the fake oracles
give fixed answers for development and tests.
"""

import logging
from abc import ABC, abstractmethod

from ..errors import ConfigurationError, IdentityRejectedError
from ..models.config import AuthStoreConfig
from ..utils.identity_http_client import IdentityHttpClient

logger = logging.getLogger(__name__)

TOKENS_PATH = "tokens"


class IdentityOracle(ABC):
    """Authority that accepts or rejects an (account, key) pair."""

    @abstractmethod
    async def authenticate(self, account_name: str, api_key: str) -> bool:
        """Return True if the provider accepts the credential.

        Implementations may raise ``AuthStoreError`` subclasses when the
        provider cannot give an answer.
        """

    async def initialize(self) -> None:
        """Acquire any resources the oracle needs before serving requests."""

    async def close(self) -> None:
        """Release any resources held by the oracle."""


class RackspaceIdentityOracle(IdentityOracle):
    """Oracle backed by the Rackspace Identity v2.0 token endpoint."""

    def __init__(self, http_client: IdentityHttpClient):
        """
        Initialize Rackspace identity oracle.

        Args:
            http_client: Identity HTTP client instance
        """
        self.http_client = http_client

    @staticmethod
    def build_auth_payload(account_name: str, api_key: str) -> dict:
        """Build the API key credentials body for a token request."""
        return {
            "auth": {
                "RAX-KSKEY:apiKeyCredentials": {
                    "username": account_name,
                    "apiKey": api_key,
                }
            }
        }

    async def authenticate(self, account_name: str, api_key: str) -> bool:
        """
        Request a token for the account using its API key.

        Only the outcome matters; the issued token is discarded.

        Args:
            account_name: Rackspace username
            api_key: Rackspace API key

        Returns:
            True if a token was issued, False if the credential was rejected

        Raises:
            ConnectionError: If Rackspace Identity cannot be reached
            AuthStoreError: If Rackspace Identity fails in any other way
        """
        try:
            await self.http_client.post(
                TOKENS_PATH, self.build_auth_payload(account_name, api_key)
            )
        except IdentityRejectedError as error:
            logger.debug(
                "Rackspace Identity rejected credential",
                extra={"account": account_name, "status_code": error.status_code},
            )
            return False
        return True

    async def initialize(self) -> None:
        await self.http_client.connect()

    async def close(self) -> None:
        await self.http_client.close()


class AcceptAllOracle(IdentityOracle):
    """Oracle that accepts every credential. Development use only."""

    async def authenticate(self, account_name: str, api_key: str) -> bool:
        return True


class RejectAllOracle(IdentityOracle):
    """Oracle that rejects every credential."""

    async def authenticate(self, account_name: str, api_key: str) -> bool:
        return False


def create_identity_oracle(config: AuthStoreConfig) -> IdentityOracle:
    """Create the identity oracle selected by ``config.identity_backend``."""
    backend = config.identity_backend

    if backend == "rackspace":
        oracle: IdentityOracle = RackspaceIdentityOracle(IdentityHttpClient(config))
    elif backend == "accept":
        logger.warning("Identity backend 'accept' validates every API key")
        oracle = AcceptAllOracle()
    elif backend == "reject":
        oracle = RejectAllOracle()
    else:
        raise ConfigurationError(
            f"Unknown identity backend: {backend!r}. Valid options: rackspace, accept, reject"
        )

    logger.info("Identity oracle: %s", type(oracle).__name__)
    return oracle
