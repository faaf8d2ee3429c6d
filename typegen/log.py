"""Loggers for the typegen package and the CLI's stderr handler."""

from __future__ import annotations

import logging

ROOT_LOGGER = "typegen"
LOG_FORMAT = "[typegen] %(levelname)s %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return the ``typegen.<name>`` logger used by one module."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Route typegen records to stderr; DEBUG with verbose, INFO otherwise.

    Calling it again replaces the handler installed by the previous call.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.handlers.clear()
    logger.propagate = False
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
