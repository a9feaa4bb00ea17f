"""
Shared pytest fixtures for auth-store tests.
"""

import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from auth_store import AuthStore, AuthStoreConfig
from auth_store.services.identity import IdentityOracle
from auth_store.services.key_cache import KeyCache
from auth_store.services.validator import ValidationService


@pytest.fixture
def config():
    """Test configuration with a small cache and the reject backend."""
    return AuthStoreConfig(
        internal_port=9101,
        log_level="debug",
        cache_size=3,
        identity_url="https://identity.example.com/v2.0",
        identity_timeout=5.0,
        identity_backend="reject",
    )


@pytest.fixture
def key_cache():
    """Fresh key cache with room for three pairs."""
    return KeyCache(3)


@pytest.fixture
def mock_oracle():
    """Mock identity oracle that accepts every credential."""
    oracle = MagicMock(spec=IdentityOracle)
    oracle.authenticate = AsyncMock(return_value=True)
    oracle.initialize = AsyncMock()
    oracle.close = AsyncMock()
    return oracle


@pytest.fixture
def validation_service(key_cache, mock_oracle):
    """Validation service wired to the fresh cache and mock oracle."""
    return ValidationService(key_cache, mock_oracle)


@pytest.fixture
def store(config, mock_oracle):
    """Test AuthStore instance using the mock oracle."""
    return AuthStore(config, oracle=mock_oracle)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo configure_logging() so caplog keeps seeing auth_store records."""
    yield
    logger = logging.getLogger("auth_store")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
