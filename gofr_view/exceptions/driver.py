"""Driver registry exceptions."""
from typing import List, Optional

from gofr_view.exceptions.base import GofrViewError


class DriverNotFoundError(GofrViewError):
    """Raised when a view driver name is not registered."""

    def __init__(self, name: str, available: Optional[List[str]] = None):
        available_text = ""
        if available:
            available_text = f" Available drivers: {', '.join(available)}."
        super().__init__(
            code="DRIVER_NOT_FOUND",
            message=f"View driver '{name}' is not registered.{available_text}",
            details={"name": name, "available": available or []},
        )
        self.name = name
