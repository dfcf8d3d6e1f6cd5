"""Logging helpers shared by the codec modules."""

import logging
import os

from crypto_multihash import config

_ROOT_LOGGER_NAME = "crypto_multihash"


def _setup_logging():
    """Attach a stream handler to the package logger, once."""
    root = logging.getLogger(_ROOT_LOGGER_NAME)
    if root.handlers:
        return

    handler = logging.StreamHandler()

    # Use different log levels based on environment
    level_name = os.getenv(config.LOG_LEVEL_ENV, config.DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    root.setLevel(level if isinstance(level, int) else logging.WARNING)

    formatter = logging.Formatter(config.LOG_FORMAT, datefmt=config.LOG_DATE_FORMAT)
    handler.setFormatter(formatter)
    root.addHandler(handler)


def get_logger(module: str) -> logging.Logger:
    """Return the logger for a submodule, e.g. ``get_logger("check")``."""
    _setup_logging()
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{module}")


def log(logger: logging.Logger, level: str, message: str, **kwargs):
    """Structured logging with optional context."""
    log_method = getattr(logger, level.lower(), logger.info)

    if kwargs:
        # Add context to message
        context = " ".join([f"{k}={v}" for k, v in kwargs.items()])
        message = f"{message} | {context}"

    log_method(message)
