"""Logging configuration helpers."""

import logging

PACKAGE_LOGGER = "macro_swap"
LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(debug: bool = False) -> logging.Logger:
    """Attach one stream handler to the package logger and set its level.

    Debug mode lowers the level to DEBUG. Calling again only updates the level.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
