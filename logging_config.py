"""
Logging configuration for FitZone+ Manager.

This module provides a centralized configuration for all loggers in the application.
It allows setting different log levels for different components and configuring
formatters and handlers.
"""

import os
import logging
from typing import Dict

from shared.constants import LOG_FORMAT


# Component logger name -> environment variable carrying its level
COMPONENT_LOGGERS = {
    "services.pricing": "LOG_LEVEL_PRICING",
    "services.report_builder": "LOG_LEVEL_REPORTS",
    "repositories": "LOG_LEVEL_REPOSITORIES",
    "commands": "LOG_LEVEL_CLI",
    "routes": "LOG_LEVEL_API",
}

# Third-party loggers kept quiet
QUIET_LOGGERS = {
    "uvicorn.access": "WARNING",
    "httpx": "WARNING",
}


def configure_logging(level: str = None):
    """Configure logging for the application."""
    log_level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    log_level = getattr(logging, log_level_name, logging.INFO)

    # Configure root logger
    logging.basicConfig(level=log_level, format=LOG_FORMAT)
    logging.getLogger().setLevel(log_level)

    loggers_config = {
        name: os.getenv(env_var, log_level_name).upper()
        for name, env_var in COMPONENT_LOGGERS.items()
    }
    loggers_config.update(QUIET_LOGGERS)

    for logger_name, level_name in loggers_config.items():
        logger = logging.getLogger(logger_name)
        logger.setLevel(getattr(logging, level_name, log_level))


def get_logger_levels() -> Dict[str, str]:
    """Get current log levels for all configured loggers."""
    result = {"root": logging.getLevelName(logging.getLogger().level)}

    for logger_name in list(COMPONENT_LOGGERS) + list(QUIET_LOGGERS):
        logger = logging.getLogger(logger_name)
        result[logger_name] = logging.getLevelName(logger.level)

    return result
