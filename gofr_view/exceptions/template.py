"""Template compilation and execution exceptions."""
from gofr_view.exceptions.base import GofrViewError


class TemplateSyntaxError(GofrViewError):
    """Raised when Jinja2 rejects a template source."""

    def __init__(self, name: str, detail: str):
        super().__init__(
            code="TEMPLATE_SYNTAX",
            message=f"template '{name}' parse error: {detail}",
            details={"name": name, "detail": detail},
        )
        self.name = name
        self.detail = detail


class TemplateExecutionError(GofrViewError):
    """Raised when a compiled template fails while rendering."""

    def __init__(self, name: str, detail: str):
        super().__init__(
            code="TEMPLATE_EXECUTION",
            message=f"template '{name}' execution error: {detail}",
            details={"name": name, "detail": detail},
        )
        self.name = name
        self.detail = detail


class ModelDecodeError(GofrViewError):
    """Raised when a JSON-encoded layout model cannot be decoded."""

    def __init__(self, detail: str):
        super().__init__(
            code="MODEL_DECODE",
            message=f"layout model could not be decoded: {detail}",
            details={"detail": detail},
        )
        self.detail = detail
