"""Logging configuration for the AI Readiness Score service."""

import logging
import sys
from typing import Optional

from config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# pdfminer logs every parsed object at DEBUG; httpx logs each model request at INFO
NOISY_LOGGERS = ("pdfminer", "pdfplumber", "httpx", "httpcore", "openai")


def _quiet_third_party() -> None:
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """Get a stdout logger; level defaults to LOG_LEVEL unless one is given."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        _quiet_third_party()
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO) if level is None else level)
    elif level is not None:
        logger.setLevel(level)
    return logger
