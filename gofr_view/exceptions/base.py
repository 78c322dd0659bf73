"""Base exception classes for gofr-view.

Every error carries a machine-readable ``code``, a human-readable
``message`` and a ``details`` mapping with the values that identify the
failing template, so hosts can log or map errors without parsing messages.
"""

from typing import Any, Dict, Optional


class GofrViewError(Exception):
    """Root of all gofr-view errors."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message, "details": self.details}


class ConfigurationError(GofrViewError):
    """Raised when configuration cannot be loaded."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="CONFIGURATION_ERROR", message=message, details=details)


__all__ = ["GofrViewError", "ConfigurationError"]
