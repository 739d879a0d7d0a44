"""Logging setup for bfi.

Every module logs through ``logging.getLogger(__name__)``. The package logger
gets a NullHandler so nothing is printed unless the application configures
logging or calls :func:`enable_debug_logging`.
"""

import logging
from typing import Optional, TextIO

PACKAGE_LOGGER = "bfi"
DEBUG_FORMAT = "%(name)s %(levelname)s: %(message)s"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def enable_debug_logging(level: int = logging.DEBUG, stream: Optional[TextIO] = None) -> logging.Handler:
    """Attach a stream handler to the bfi logger.

    At DEBUG level the VM traces every executed instruction, which gives the
    same view as stepping through the program by hand. Returns the handler so
    callers can remove it again.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
