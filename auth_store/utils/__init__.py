"""Utility modules for the auth-store service."""

from .config_loader import load_config
from .data_masker import DataMasker
from .identity_http_client import IdentityHttpClient
from .logging_setup import configure_logging

__all__ = ["load_config", "DataMasker", "IdentityHttpClient", "configure_logging"]
