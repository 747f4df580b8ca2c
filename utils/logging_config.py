"""
Logging Setup

Console logging shared by main.py and the maintenance scripts.
"""

import os
import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def configure_logging(level=None):
    """
    Configure root logging. The level falls back to LOG_LEVEL, then INFO.
    """
    level = (level or os.getenv("LOG_LEVEL") or "INFO").strip().upper()
    if level not in LOG_LEVELS:
        level = "INFO"
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
    # urllib3 debug lines contain request URLs, including the bot token
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    return level
