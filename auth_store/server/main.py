"""
Server entry point.

Loads settings from the environment, configures logging and serves the
validation API on the internal port with mutual TLS.
"""

import logging
import ssl
import sys
from typing import Optional

import uvicorn

from .. import AuthStore
from ..errors import ConfigurationError
from ..models.config import AuthStoreConfig
from ..utils.config_loader import load_config, summarize_config
from ..utils.logging_setup import configure_logging
from .app import create_app

logger = logging.getLogger(__name__)


def build_uvicorn_options(config: AuthStoreConfig) -> dict:
    """Uvicorn keyword arguments for the internal mTLS listener."""
    return {
        "host": "0.0.0.0",
        "port": config.internal_port,
        "ssl_certfile": config.internal_cert,
        "ssl_keyfile": config.internal_key,
        "ssl_ca_certs": config.internal_ca_cert,
        "ssl_cert_reqs": ssl.CERT_REQUIRED,
        "log_config": None,
        "access_log": False,
    }


def main(config: Optional[AuthStoreConfig] = None) -> None:
    """Run the auth-store server until interrupted."""
    if config is None:
        try:
            config = load_config()
        except ConfigurationError as error:
            configure_logging("error")
            logger.error("Unable to load configuration: %s", error.message)
            sys.exit(1)

    configure_logging(config.log_level)
    summarize_config(config)

    app = create_app(AuthStore(config))
    logger.info("Internal listener starting on %s.", config.internal_listen_addr)
    uvicorn.run(app, **build_uvicorn_options(config))


if __name__ == "__main__":
    main()
