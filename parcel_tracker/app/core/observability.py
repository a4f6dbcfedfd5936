"""
Logging setup for the Parcel Tracker.

All modules log through the ``parcel_tracker`` logger (or its children) and
pass structured context with ``extra=``.
"""

import logging
from typing import Optional

from parcel_tracker.app.core.config import settings

LOGGER_NAME = "parcel_tracker"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

logger = logging.getLogger(LOGGER_NAME)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or a child of it."""
    if not name:
        return logger
    return logger.getChild(name)


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.
    
    Safe to call more than once; the handler is installed only the first time.
    
    Args:
        level: Log level name, defaults to ``settings.log_level``
        
    Returns:
        The configured package logger
    """
    logger.setLevel((level or settings.log_level).upper())
    
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    
    return logger
