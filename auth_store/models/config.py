"""
Configuration types for the auth-store service.

This module contains Pydantic models that define the configuration structure
and the result types used throughout the service.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

DEFAULT_IDENTITY_URL = "https://identity.api.rackspacecloud.com/v2.0"


class AuthStoreConfig(BaseModel):
    """Main auth-store configuration.

    Every field has a default, so ``AuthStoreConfig()`` describes a service
    listening on 9001 with a 10000-entry key cache backed by Rackspace Identity.
    """

    internal_port: int = Field(
        default=9001, ge=1, le=65535, description="Port for the internal mTLS listener"
    )
    log_level: Literal["debug", "info", "warning", "error", "critical"] = Field(
        default="info",
        description="Log level"
    )
    internal_ca_cert: str = Field(
        default="/certificates/ca.pem",
        description="CA certificate used to verify internal clients"
    )
    internal_cert: str = Field(
        default="/certificates/auth-store-cert.pem",
        description="Server certificate for the internal listener"
    )
    internal_key: str = Field(
        default="/certificates/auth-store-key.pem",
        description="Private key for the internal listener"
    )
    cache_size: int = Field(default=10000, ge=1, description="Maximum number of cached API keys")
    identity_url: str = Field(default=DEFAULT_IDENTITY_URL, description="Identity provider base URL")
    identity_timeout: float = Field(
        default=30.0,
        gt=0,
        description="Timeout in seconds for identity provider requests"
    )
    identity_backend: Literal["rackspace", "accept", "reject"] = Field(
        default="rackspace",
        description="Identity oracle implementation"
    )

    @property
    def internal_listen_addr(self) -> str:
        """Address to bind the internal listener to."""
        return f":{self.internal_port}"


class ValidationResult(str, Enum):
    """Outcome of a single key validation."""

    VALID = "valid"
    INVALID = "invalid"
