"""
Logging helpers for luhnmodn.

Loggers live under the ``luhnmodn`` namespace. A stream handler is attached
lazily on first use, with the level taken from the LUHNMODN_LOG_LEVEL
environment variable.
"""

import logging
import os

from luhnmodn.config import LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL

_root_logger = logging.getLogger("luhnmodn")


def setup_logging() -> logging.Logger:
    """Setup logging configuration for the library."""
    if not _root_logger.handlers:
        handler = logging.StreamHandler()

        level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
        _root_logger.setLevel(getattr(logging, level_name, logging.WARNING))

        # Structured formatting
        formatter = logging.Formatter(
            "[%(asctime)s.%(msecs)03d] %(levelname)s [%(name)s]: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        _root_logger.addHandler(handler)

    return _root_logger


def get_logger(name: str) -> logging.Logger:
    """Return a child logger of ``luhnmodn``, configuring the root on first use."""
    setup_logging()
    return _root_logger.getChild(name)


def log(logger: logging.Logger, level: str, message: str, **kwargs) -> None:
    """Structured logging with optional context."""
    level_no = getattr(logging, level.upper(), logging.INFO)
    if not logger.isEnabledFor(level_no):
        return

    if kwargs:
        # Add context to message
        context = " ".join([f"{k}={v}" for k, v in kwargs.items()])
        message = f"{message} | {context}"

    logger.log(level_no, message)
