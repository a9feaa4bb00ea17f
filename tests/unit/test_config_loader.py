"""
Unit tests for config loader.
"""

import logging
import os
from unittest.mock import patch

import pytest

from auth_store.errors import ConfigurationError
from auth_store.models.config import DEFAULT_IDENTITY_URL, AuthStoreConfig
from auth_store.utils.config_loader import load_config, summarize_config


@pytest.fixture
def clean_env():
    """Environment without AUTH_* variables and without .env loading."""
    env = {key: value for key, value in os.environ.items() if not key.startswith("AUTH_")}
    with patch.dict(os.environ, env, clear=True):
        with patch("auth_store.utils.config_loader.load_dotenv"):
            yield os.environ


class TestConfigLoader:
    """Test cases for config loader."""

    def test_load_config_defaults(self, clean_env):
        """Test loading with no variables set."""
        config = load_config()

        assert config.internal_port == 9001
        assert config.log_level == "info"
        assert config.internal_ca_cert == "/certificates/ca.pem"
        assert config.internal_cert == "/certificates/auth-store-cert.pem"
        assert config.internal_key == "/certificates/auth-store-key.pem"
        assert config.cache_size == 10000
        assert config.identity_url == DEFAULT_IDENTITY_URL
        assert config.identity_timeout == 30.0
        assert config.identity_backend == "rackspace"
        assert config.internal_listen_addr == ":9001"

    def test_load_config_overrides(self, clean_env):
        """Test every variable overrides its default."""
        clean_env.update(
            {
                "AUTH_INTERNAL_PORT": "8443",
                "AUTH_LOG_LEVEL": "DEBUG",
                "AUTH_INTERNAL_CA_CERT": "/tmp/ca.pem",
                "AUTH_INTERNAL_CERT": "/tmp/cert.pem",
                "AUTH_INTERNAL_KEY": "/tmp/key.pem",
                "AUTH_CACHE_SIZE": "25",
                "AUTH_IDENTITY_URL": "https://identity.example.com/v2.0",
                "AUTH_IDENTITY_TIMEOUT": "2.5",
                "AUTH_IDENTITY_BACKEND": "Accept",
            }
        )

        config = load_config()

        assert config.internal_port == 8443
        assert config.internal_listen_addr == ":8443"
        assert config.log_level == "debug"
        assert config.internal_ca_cert == "/tmp/ca.pem"
        assert config.internal_cert == "/tmp/cert.pem"
        assert config.internal_key == "/tmp/key.pem"
        assert config.cache_size == 25
        assert config.identity_url == "https://identity.example.com/v2.0"
        assert config.identity_timeout == 2.5
        assert config.identity_backend == "accept"

    def test_zero_and_empty_values_use_defaults(self, clean_env):
        """Test zero or blank values fall back to defaults."""
        clean_env.update(
            {
                "AUTH_INTERNAL_PORT": "0",
                "AUTH_CACHE_SIZE": "0",
                "AUTH_LOG_LEVEL": "",
                "AUTH_INTERNAL_CERT": "   ",
            }
        )

        config = load_config()

        assert config.internal_port == 9001
        assert config.cache_size == 10000
        assert config.log_level == "info"
        assert config.internal_cert == "/certificates/auth-store-cert.pem"

    def test_warn_alias(self, clean_env):
        clean_env["AUTH_LOG_LEVEL"] = "warn"

        assert load_config().log_level == "warning"

    @pytest.mark.parametrize("value", ["fatal", "FATAL", "panic", "critical"])
    def test_critical_level_aliases(self, clean_env, value):
        """Test logrus fatal/panic levels load as critical."""
        clean_env["AUTH_LOG_LEVEL"] = value

        assert load_config().log_level == "critical"

    @pytest.mark.parametrize(
        "name,value",
        [
            ("AUTH_INTERNAL_PORT", "not-a-port"),
            ("AUTH_INTERNAL_PORT", "-5"),
            ("AUTH_INTERNAL_PORT", "65536"),
            ("AUTH_CACHE_SIZE", "ten"),
            ("AUTH_CACHE_SIZE", "-5"),
            ("AUTH_IDENTITY_TIMEOUT", "soon"),
            ("AUTH_LOG_LEVEL", "verbose"),
            ("AUTH_IDENTITY_BACKEND", "ldap"),
        ],
    )
    def test_invalid_values_raise(self, clean_env, name, value):
        """Test invalid values raise ConfigurationError."""
        clean_env[name] = value

        with pytest.raises(ConfigurationError):
            load_config()

    def test_load_dotenv_called(self, clean_env):
        """Test .env files are loaded before reading the environment."""
        with patch("auth_store.utils.config_loader.load_dotenv") as mock_load_dotenv:
            load_config()

        mock_load_dotenv.assert_called_once_with()

    def test_summarize_config(self, caplog):
        """Test loaded settings are summarized in one log record."""
        with caplog.at_level(logging.INFO, logger="auth_store.utils.config_loader"):
            summarize_config(AuthStoreConfig(cache_size=42))

        record = caplog.records[-1]
        assert record.getMessage() == "Initializing with loaded settings."
        assert record.cache_size == 42
        assert record.internal_port == 9001
