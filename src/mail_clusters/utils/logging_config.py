"""
Logging configuration for Mail Clusters.

Modules obtain their logger with ``get_logger(__name__)``; applications (the
CLI, a web route) call ``setup_logging()`` once to attach a console handler
to the package's root logger.

Usage:
    from mail_clusters.utils.logging_config import get_logger, setup_logging

    setup_logging("DEBUG")
    logger = get_logger(__name__)
"""

import logging
from typing import Optional, Union

PACKAGE_LOGGER_NAME = "mail_clusters"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return a logger inside the package namespace.

    Names that do not already start with ``mail_clusters`` are nested under
    it so that ``setup_logging`` controls them too.
    """
    if not name or name == "__main__":
        return logging.getLogger(PACKAGE_LOGGER_NAME)
    if name == PACKAGE_LOGGER_NAME or name.startswith(PACKAGE_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER_NAME}.{name}")


def setup_logging(
    level: Union[int, str] = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """
    Configure the package logger with a single console handler.

    Calling this more than once only updates the level; handlers are not
    duplicated.

    Args:
        level: Logging level name ("DEBUG", "INFO", ...) or numeric level
        fmt: Format string for the console handler

    Returns:
        The configured package logger

    Raises:
        ValueError: If *level* is not a known logging level name
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt, datefmt=DEFAULT_DATEFMT))
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(level)

    return logger
