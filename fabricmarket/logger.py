"""
Logging configuration for the fabric marketplace.

Provides one `fabricmarket` logger, configured from LOG_LEVEL, that every
module hangs its own child logger off.
"""
import logging
import sys

from .config import LOG_LEVEL

logger = logging.getLogger("fabricmarket")
logger.setLevel(LOG_LEVEL)

if not logger.handlers:
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(LOG_LEVEL)

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)

# Avoid duplicate lines under uvicorn's root handler
logger.propagate = False


def get_logger(name: str = None) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Optional name for the logger (will be appended to 'fabricmarket')

    Returns:
        Logger instance
    """
    if name:
        return logging.getLogger(f"fabricmarket.{name}")
    return logger
