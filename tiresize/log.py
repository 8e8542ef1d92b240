"""
Logging setup for the command line and server.

Library modules log through ``logging.getLogger(__name__)`` and stay silent
until a handler is attached to the package logger here.
"""

import logging
import sys
from typing import Optional, TextIO

# Package logger; every module logger is a child of it
LOGGER_NAME = __name__.rpartition(".")[0]

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _parse_level(level: str) -> int:
    """Map a level name such as "debug" to its number, WARNING if unknown."""
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.WARNING


def setup_logging(level: str = "WARNING", stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Calling again only changes the level; the first handler is kept.
    Diagnostics go to stderr unless another stream is given, so command
    output on stdout stays parseable.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(_parse_level(level))

    if not logger.handlers:
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    return logger
