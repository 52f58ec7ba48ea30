"""
Shared logger for the grievance analysis service
"""

import logging
import logging.handlers
import sys
from pathlib import Path

from config.settings import Settings, settings

LOGGER_NAME = "grievance-analysis"

def setup_logger(name: str = LOGGER_NAME, config: Settings = settings) -> logging.Logger:
    """
    Build a named logger writing to stdout and, when enabled, a rotating file

    Handlers are attached only once per logger name, so repeated calls
    return the already configured instance.

    Args:
        name: Logger name (default 'grievance-analysis')
        config: Settings providing LOG_LEVEL, LOG_FORMAT and LOG_FILE_* values

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, config.log_level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=config.log_format, datefmt=config.log_date_format)

    stream = logging.StreamHandler(sys.stdout)
    stream.setFormatter(formatter)
    logger.addHandler(stream)

    if config.log_to_file:
        log_path = Path(config.log_file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        rotating = logging.handlers.TimedRotatingFileHandler(
            filename=log_path,
            when=config.log_file_rotation,
            interval=1,
            backupCount=config.log_file_retention,
            encoding="utf-8"
        )
        rotating.setFormatter(formatter)
        logger.addHandler(rotating)

    logger.propagate = False
    return logger

logger = setup_logger()
