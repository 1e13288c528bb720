"""Logging helpers shared by the checker and the harness."""

import logging
from typing import Optional, TextIO


ROOT_LOGGER = "tombcrawler"

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def configure_logging(level: int = logging.WARNING, stream: Optional[TextIO] = None) -> logging.Logger:
    """Attach a single stderr handler to the ``tombcrawler`` logger.

    The checker traces every corner and border cell it tries at ``DEBUG``,
    so the CLI only lowers the level when asked to be verbose. Calling this
    again replaces the handler instead of adding a second one.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Module logger under the project namespace.

    ``src.checker.chest`` becomes ``tombcrawler.checker.chest``.
    """
    if name.startswith("src."):
        name = name[len("src."):]
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
