"""Centralized logging configuration for the schema scaffold tool.

This module provides a configured logger instance that can be imported and used
throughout the application. The logger is configured with both console and file
handlers using settings from logging_config.json.

Usage:
    from schema_scaffold.logger import logger

    logger.info("This is an info message")
    logger.warning("This is a warning message")
    logger.debug("This is a debug message")
"""

from .logger import logger, setup_logger

__all__ = ["logger", "setup_logger"]
