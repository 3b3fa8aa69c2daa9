# utils/logger.py
"""
Shared application logger

Every module logs through `from utils.logger import logger`.
"""

import logging
import sys

from utils.config import get_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logger(name: str = "healthdash") -> logging.Logger:
    """Configure the stream handler once and return the named logger"""
    log = logging.getLogger(name)
    if log.handlers:
        return log

    level = getattr(logging, get_settings().LOG_LEVEL.upper(), logging.INFO)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    log.addHandler(handler)
    log.setLevel(level)
    log.propagate = False
    return log


logger = setup_logger()
