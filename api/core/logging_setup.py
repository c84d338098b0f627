"""
Logging helpers for the Users API.

Modules log through logging.getLogger(__name__); the process entry point
calls configure_logging once with the active Settings.
"""

import logging

from .config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings) -> int:
    """Attach a console handler at settings.log_level and return the numeric level."""
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    return level
