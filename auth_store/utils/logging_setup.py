"""
Logging configuration for the auth-store service.

Log calls pass structured context through ``extra=``. ``ContextFormatter``
renders that context as ``key=value`` pairs after the message, masking
sensitive fields with ``DataMasker``.
"""

import logging
import sys
from typing import Any, Dict, Optional

from .data_masker import DataMasker

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Attributes present on every LogRecord; anything else came from ``extra=``.
_RESERVED_ATTRS = set(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName"}


def get_record_context(record: logging.LogRecord) -> Dict[str, Any]:
    """Return the masked ``extra=`` context attached to a log record."""
    context = {
        key: value for key, value in record.__dict__.items() if key not in _RESERVED_ATTRS
    }
    return DataMasker.mask_sensitive_data(context)


class ContextFormatter(logging.Formatter):
    """Formatter that appends masked structured context to each line."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = get_record_context(record)
        if not context:
            return line
        fields = " ".join(f"{key}={value}" for key, value in sorted(context.items()))
        return f"{line} | {fields}"


def configure_logging(level: str = "info", stream: Optional[Any] = None) -> logging.Logger:
    """
    Configure the ``auth_store`` logger hierarchy.

    Safe to call more than once: the previous handler is replaced rather than
    duplicated.

    Args:
        level: Log level name (debug, info, warning, error)
        stream: Output stream, defaults to stdout

    Returns:
        The configured package logger
    """
    logger = logging.getLogger("auth_store")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(ContextFormatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
