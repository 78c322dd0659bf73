"""Logger interface.

Every component takes a ``Logger`` so hosts can route gofr-view messages into
their own logging setup. Messages carry structured fields as keyword
arguments::

    logger.info("View rendered", view="home", session_id=sid)
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Abstract structured logger."""

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        pass


def format_fields(message: str, fields: dict) -> str:
    """Render ``message key=value ...`` with fields in call order."""
    if not fields:
        return message
    rendered = " ".join(f"{key}={value}" for key, value in fields.items())
    return f"{message} {rendered}"
