"""Session-related exceptions."""

from typing import Any, Dict, Optional

from gofr_view.exceptions.base import GofrViewError


class InvalidSessionStateError(GofrViewError):
    """Raised when a render session is in the wrong state for the requested phase."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="INVALID_SESSION_STATE", message=message, details=details or {})
