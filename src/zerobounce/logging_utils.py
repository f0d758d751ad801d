"""Logging helpers."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"
PACKAGE_LOGGER = "zerobounce"


def configure_logging(verbose: bool = False) -> None:
    """Configure CLI logging; debug output covers this package only."""
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
    get_logger().setLevel(logging.DEBUG if verbose else logging.WARNING)
    # urllib3 logs request paths, api_key included, at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def get_logger() -> logging.Logger:
    """Return the package logger."""
    return logging.getLogger(PACKAGE_LOGGER)
