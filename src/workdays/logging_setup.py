from __future__ import annotations

import logging
import sys

from workdays.config import LoggingConfig


def setup_logging(config: LoggingConfig) -> logging.Logger:
    """
    Attach a stdout handler to the ``workdays`` logger.  Repeated calls
    replace the handler instead of stacking another one.
    """
    level = getattr(logging, config.level.upper(), logging.INFO)

    logger = logging.getLogger("workdays")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(config.format))
    logger.addHandler(console)
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"workdays.{name}")
