"""Logger that forwards to the standard library ``logging`` tree."""

import logging
from typing import Any

from gofr_view.logger.interface import Logger, format_fields


class DefaultLogger(Logger):
    """Forwards to ``logging.getLogger(name)`` without touching handlers.

    Suitable when gofr-view is embedded in an application that already
    configures logging.
    """

    def __init__(self, name: str = "gofr_view"):
        self._logger = logging.getLogger(name)

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
