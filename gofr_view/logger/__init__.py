"""
Logger module for gofr-view

This module provides a flexible logging interface that allows users to
drop in their own logger implementations.

Usage:
    from gofr_view.logger import Logger, DefaultLogger

    # Use the default logger
    logger = DefaultLogger()
    logger.info("Connection created", root="asset/views")

    # Or implement your own
    class MyCustomLogger(Logger):
        def info(self, message: str, **kwargs):
            # Your custom implementation
            pass
"""

import logging

from .interface import Logger
from .default_logger import DefaultLogger
from .console_logger import ConsoleLogger

# Shared logger instance for entry points that just need basic console logging
session_logger: Logger = ConsoleLogger(level=logging.DEBUG)

__all__ = [
    "Logger",
    "DefaultLogger",
    "ConsoleLogger",
    "session_logger",
]
