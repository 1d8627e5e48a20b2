"""Logging utilities for gistup modules."""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "gistup"


def get_logger(name: str) -> logging.Logger:
    """Get a logger that inherits its level and handlers from the package logger.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def configure_logging(verbose: bool = False) -> None:
    """Send package log records to stderr through rich."""
    level = logging.DEBUG if verbose else logging.WARNING
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
