"""Custom exceptions for the view rendering pipeline.

All exceptions derive from GofrViewError and carry a code, a message and a
details mapping describing the failing template.
"""

from gofr_view.exceptions.base import ConfigurationError, GofrViewError
from gofr_view.exceptions.driver import DriverNotFoundError
from gofr_view.exceptions.session import InvalidSessionStateError
from gofr_view.exceptions.template import (
    ModelDecodeError,
    TemplateExecutionError,
    TemplateSyntaxError,
)
from gofr_view.exceptions.view import ReadFailureError, ViewNotFoundError

__all__ = [
    # Base exceptions
    "GofrViewError",
    "ConfigurationError",
    # Specific exceptions
    "ViewNotFoundError",
    "ReadFailureError",
    "TemplateSyntaxError",
    "TemplateExecutionError",
    "ModelDecodeError",
    "InvalidSessionStateError",
    "DriverNotFoundError",
]
