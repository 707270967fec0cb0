"""
Logging setup for the terminal.

Modules log through `logging.getLogger(__name__)`; this module
attaches a single console handler to the package logger.
"""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

PACKAGE_LOGGER = "atm_terminal"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the package logger.

    Safe to call more than once: the console handler is only
    added the first time, later calls just update the level.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    return logger
