# clusterconf/core/utils/logger.py

"""
Logging configuration and utilities for clusterconf.

This module provides centralized logging configuration and helper functions
so that schema construction, plugin registration, value changes and
persistence all report through the same ``clusterconf`` logger.

Key Features:
- Global logger instance with lazy initialization
- Standardized log message formats tagged with the emitting module
- Configuration change logging
- File operation logging
"""

import logging
import os
import sys
from typing import Any

# Global logger instance for singleton pattern
_logger: logging.Logger | None = None

# Default logging configuration values
# CLUSTERCONF_LOG_LEVEL overrides the level when none is given explicitly
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL_ENV = "CLUSTERCONF_LOG_LEVEL"


def setup_logging(
    level: str | None = None,
    log_file: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Set up logging configuration for clusterconf.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Falls
               back to CLUSTERCONF_LOG_LEVEL, then to INFO.
        log_file: Path to log file (optional). If provided, logs will be
                 written to both stderr and the file.
        format_string: Custom log format string (optional).

    Returns:
        Configured logger instance

    Note:
        Calling this again replaces the handlers installed by the previous
        call, so it is safe to reconfigure (for example from the CLI).
    """
    global _logger

    level = (level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    numeric_level = getattr(logging, level, logging.INFO)

    logger = logging.getLogger("clusterconf")
    logger.disabled = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(numeric_level)

    formatter = logging.Formatter(format_string or DEFAULT_LOG_FORMAT)

    # stderr keeps log lines out of command output such as `config list`
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """
    Get the global logger instance.

    If the logger hasn't been initialized yet, it will be set up
    with default configuration.
    """
    if _logger is None:
        return setup_logging()
    return _logger


def _format(module: str, message: str, context: str = "") -> str:
    formatted = f"[{module.upper()}] {message}"
    if context:
        formatted += f" | Context: {context}"
    return formatted


def log_warning(module: str, warning: str, context: str = "") -> None:
    """Log a standardized warning message."""
    get_logger().warning(_format(module, warning, context))


def log_info(module: str, message: str, context: str = "") -> None:
    """Log a standardized info message."""
    get_logger().info(_format(module, message, context))


def log_debug(module: str, message: str, context: str = "") -> None:
    """Log a standardized debug message."""
    get_logger().debug(_format(module, message, context))


def log_configuration_change(setting: str, old_value: Any, new_value: Any) -> None:
    """
    Log a configuration change.

    Args:
        setting: Fully-qualified name of the field that changed
        old_value: Previous value of the field
        new_value: New value of the field
    """
    logger = get_logger()
    logger.info(f"Configuration changed: {setting} = {old_value!r} -> {new_value!r}")


def log_file_operation(
    operation: str, file_path: str, success: bool, error: str | None = None
) -> None:
    """
    Log a file operation.

    Args:
        operation: Type of operation (read, write, delete, etc.)
        file_path: Path to the file being operated on
        success: Whether the operation was successful
        error: Error message if the operation failed (optional)
    """
    logger = get_logger()
    if success:
        logger.info(f"File {operation}: {file_path}")
    else:
        logger.error(f"File {operation} failed: {file_path} - {error}")


def reset_logging() -> None:
    """
    Reset the global logger instance.

    This is useful for testing or when you need to reconfigure
    the logging system from scratch.
    """
    global _logger
    logger = logging.getLogger("clusterconf")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    _logger = None
