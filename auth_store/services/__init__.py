"""Service implementations for the auth-store service."""

from .identity import (
    AcceptAllOracle,
    IdentityOracle,
    RackspaceIdentityOracle,
    RejectAllOracle,
    create_identity_oracle,
)
from .key_cache import KeyCache
from .validator import ValidationService

__all__ = [
    "KeyCache",
    "ValidationService",
    "IdentityOracle",
    "RackspaceIdentityOracle",
    "AcceptAllOracle",
    "RejectAllOracle",
    "create_identity_oracle",
]
