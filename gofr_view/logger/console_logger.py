"""Console logger with its own stream handler."""

import logging
import sys
from typing import Any, Optional, TextIO

from gofr_view.logger.interface import Logger, format_fields

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class ConsoleLogger(Logger):
    """Writes structured messages to a stream (stderr by default)."""

    def __init__(
        self,
        name: str = "gofr-view",
        level: int = logging.INFO,
        stream: Optional[TextIO] = None,
    ):
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)
        self._logger.propagate = False

        # Re-creating a ConsoleLogger with the same name must not stack handlers
        if not self._logger.handlers:
            handler = logging.StreamHandler(stream or sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            self._logger.addHandler(handler)

    def set_level(self, level: int) -> None:
        self._logger.setLevel(level)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(format_fields(message, kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(format_fields(message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(format_fields(message, kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(format_fields(message, kwargs))

    def critical(self, message: str, **kwargs: Any) -> None:
        self._logger.critical(format_fields(message, kwargs))
