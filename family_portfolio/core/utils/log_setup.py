"""
Loguru sink configuration shared by the API and the CLI.
"""

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str = "INFO") -> None:
    """Configure logging with loguru."""
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level.upper())
