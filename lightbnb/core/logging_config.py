"""
Logging Configuration Module.

This module provides centralized logging configuration for LightBnB.
It sets up console logging, optional file logging and per-module levels
from ``settings.logging``.

Features:
- Configurable log levels per module
- Console and file logging
- Simple, detailed and JSON-like line formats
"""

import logging
from pathlib import Path
from typing import Optional

from lightbnb.core.config import settings

# Define log formats
SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"

JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
    '"module": "%(filename)s", "function": "%(funcName)s", "line": %(lineno)d, '
    '"message": "%(message)s"}'
)

LOG_FILE_NAME = "lightbnb.log"

# Module-specific log levels
MODULE_LOG_LEVELS = {
    "lightbnb": "INFO",
    "lightbnb.core.database": "INFO",
    "lightbnb.core.database.repositories": "INFO",
    # Third-party libraries (reduce noise)
    "sqlalchemy": "WARNING",
    "sqlalchemy.engine": "WARNING",
    "sqlalchemy.pool": "WARNING",
    "asyncio": "WARNING",
    "aiosqlite": "WARNING",
}


def _resolve_format(fmt: str) -> str:
    if fmt == "json":
        return JSON_FORMAT
    if fmt == "simple":
        return SIMPLE_FORMAT
    return DETAILED_FORMAT


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_file: Optional[bool] = None,
) -> None:
    """
    Configure logging for the application.

    Args:
        log_level: Override configured log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Override configured format (simple, detailed, json)
        enable_file: Override whether file logging is enabled
    """
    level = (log_level or settings.logging.level).upper()
    fmt = log_format or settings.logging.format
    to_file = settings.logging.enable_file if enable_file is None else enable_file

    formatter = logging.Formatter(_resolve_format(fmt), datefmt="%Y-%m-%d %H:%M:%S")

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture all levels, filter at handler level

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if to_file:
        log_dir = Path(settings.logging.file_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / LOG_FILE_NAME)
        file_handler.setLevel(logging.DEBUG)  # Always log DEBUG to file
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    for module_name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(module_name).setLevel(module_level)

    # A DEBUG request also opens up the package loggers
    if level == "DEBUG":
        for module_name in MODULE_LOG_LEVELS:
            if module_name.split(".")[0] == "lightbnb":
                logging.getLogger(module_name).setLevel(logging.DEBUG)

    root_logger.info(f"Logging configured: level={level}, format={fmt}, file_logging={to_file}")


# Configure logging on module import
setup_logging()
