"""Logging configuration helpers."""

import logging

LOGGER_NAME = "nutrition_labeling"
LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(*, debug: bool = False) -> logging.Logger:
    """Attach one stream handler to the package logger and set its level.

    Safe to call repeatedly: the level follows the latest call, the handler
    is added only once.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    return logger
