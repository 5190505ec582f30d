"""Logging setup for the command-line entry point.

Library modules only create loggers; handlers are installed here, once,
by the CLI.
"""

from __future__ import annotations

import logging
import sys

_HANDLER_TAG = "_taxotree_handler"

LOG_FORMAT = "%(levelname)s | %(name)s | %(message)s"


def level_from_flags(verbose: bool = False, quiet: bool = False) -> int:
    """Map -v/-q flags to a logging level."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def configure_logging(level: int = logging.WARNING) -> logging.Logger:
    """Attach a stderr handler to the ``taxotree`` logger.

    Calling it again replaces the level without stacking handlers.

    Returns:
        The package logger.
    """
    logger = logging.getLogger("taxotree")
    logger.setLevel(level)
    for handler in logger.handlers:
        if getattr(handler, _HANDLER_TAG, False):
            handler.setLevel(level)
            return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    setattr(handler, _HANDLER_TAG, True)
    logger.addHandler(handler)
    logger.propagate = False
    return logger
