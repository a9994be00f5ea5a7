"""Logging configuration."""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "WARNING") -> None:
    """Configure pocketledger logging on stderr.

    Only the ``pocketledger`` logger is touched; calling this again
    replaces the handler installed by the previous call. Records
    do not propagate to the root logger, so they are printed once.
    """
    logger = logging.getLogger("pocketledger")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper()))
    logger.propagate = False
