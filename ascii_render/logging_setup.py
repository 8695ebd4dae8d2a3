"""Diagnostic logging for the command-line tool."""

import logging
import sys


_LOGGER_NAME = "ascii_render"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """
    Send ascii_render log records to stderr.

    Stdout is reserved for the rendering, so diagnostics never go there.
    Calling this again only updates the level.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger() -> logging.Logger:
    return logging.getLogger(_LOGGER_NAME)
