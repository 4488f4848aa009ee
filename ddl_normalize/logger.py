"""Logging setup shared by the library and the CLI."""

import logging
import sys


_DEF_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def get_logger(name: str = "ddl_normalize", level: int | None = None) -> logging.Logger:
    """Return a logger writing to stderr, installing the handler once."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_DEF_FORMAT))
        logger.addHandler(handler)
    if level is not None:
        logger.setLevel(level)
    return logger
