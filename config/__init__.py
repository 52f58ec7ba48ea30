"""
Application configuration package
"""

from .settings import Settings, settings
from .logging_config import LOGGER_NAME, logger, setup_logger

__all__ = [
    "Settings",
    "settings",
    "LOGGER_NAME",
    "logger",
    "setup_logger"
]
