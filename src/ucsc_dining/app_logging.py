"""Logging configuration helpers."""

import logging

LOGGER_NAME = "ucsc_dining"


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach one stream handler to the library logger and set its level.

    Called by the containers when ``debug`` is enabled; calling it again only
    updates the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s: %(name)s: %(message)s")
        )
        logger.addHandler(handler)
        logger.propagate = False
    return logger
