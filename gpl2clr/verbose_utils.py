"""Utilities for verbose logging in gpl2clr."""

import logging
import sys

VERBOSE_FORMAT = "[gpl2clr] %(message)s"


def get_verbose_logger(name: str, verbose: bool = False) -> logging.Logger:
    """Get a logger that prints progress to stdout only when verbose is enabled.

    Handlers are rebuilt on every call so the stream always points at the
    current ``sys.stdout``.
    """
    logger = logging.getLogger(name)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    if verbose:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(VERBOSE_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)
    else:
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.WARNING)

    # Avoid duplicate logs via root logger
    logger.propagate = False
    return logger
