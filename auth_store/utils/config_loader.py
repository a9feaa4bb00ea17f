"""
Configuration loader utility.

Loads AUTH_* environment variables, falling back to defaults for values that
are unset, empty or zero.
"""

import logging
import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from ..errors import ConfigurationError
from ..models.config import AuthStoreConfig

logger = logging.getLogger(__name__)

ENV_PREFIX = "AUTH_"

# logrus level names accepted for compatibility with existing deployments
_LOG_LEVEL_ALIASES = {"warn": "warning", "fatal": "critical", "panic": "critical"}


def _get_env(name: str) -> Optional[str]:
    value = os.environ.get(f"{ENV_PREFIX}{name}", "").strip()
    return value or None


def _get_int(name: str) -> Optional[int]:
    raw = _get_env(name)
    if raw is None:
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}")
    return value or None


def _get_float(name: str) -> Optional[float]:
    raw = _get_env(name)
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ConfigurationError(f"{ENV_PREFIX}{name} must be a number, got {raw!r}")
    return value or None


def load_config() -> AuthStoreConfig:
    """
    Load configuration from environment variables with defaults.

    Optional environment variables:
    - AUTH_INTERNAL_PORT (default: 9001)
    - AUTH_LOG_LEVEL (debug, info, warning, error, critical; warn, fatal and
      panic are accepted as aliases; default: info)
    - AUTH_INTERNAL_CA_CERT, AUTH_INTERNAL_CERT, AUTH_INTERNAL_KEY
    - AUTH_CACHE_SIZE (default: 10000)
    - AUTH_IDENTITY_URL (default: Rackspace US identity endpoint)
    - AUTH_IDENTITY_TIMEOUT (default: 30 seconds)
    - AUTH_IDENTITY_BACKEND (rackspace, accept, reject; default: rackspace)

    Returns:
        AuthStoreConfig instance

    Raises:
        ConfigurationError: If a variable holds an invalid value
    """
    load_dotenv()

    values: Dict[str, Any] = {
        "internal_port": _get_int("INTERNAL_PORT"),
        "internal_ca_cert": _get_env("INTERNAL_CA_CERT"),
        "internal_cert": _get_env("INTERNAL_CERT"),
        "internal_key": _get_env("INTERNAL_KEY"),
        "cache_size": _get_int("CACHE_SIZE"),
        "identity_url": _get_env("IDENTITY_URL"),
        "identity_timeout": _get_float("IDENTITY_TIMEOUT"),
    }

    log_level = _get_env("LOG_LEVEL")
    if log_level:
        log_level = log_level.lower()
        values["log_level"] = _LOG_LEVEL_ALIASES.get(log_level, log_level)

    backend = _get_env("IDENTITY_BACKEND")
    if backend:
        values["identity_backend"] = backend.lower()

    try:
        config = AuthStoreConfig(**{k: v for k, v in values.items() if v is not None})
    except ValidationError as error:
        raise ConfigurationError(f"Invalid configuration: {error}")

    return config


def summarize_config(config: AuthStoreConfig) -> None:
    """Log the loaded settings in a single line."""
    logger.info(
        "Initializing with loaded settings.",
        extra={
            "internal_port": config.internal_port,
            "log_level": config.log_level,
            "internal_ca_cert": config.internal_ca_cert,
            "internal_cert": config.internal_cert,
            "internal_key": config.internal_key,
            "cache_size": config.cache_size,
            "identity_url": config.identity_url,
            "identity_backend": config.identity_backend,
        },
    )
