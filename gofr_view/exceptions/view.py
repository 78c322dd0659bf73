"""View resolution and loading exceptions."""
from pathlib import Path
from typing import List, Optional, Sequence, Union

from gofr_view.exceptions.base import GofrViewError
from gofr_view.models.view import ViewKind


class ViewNotFoundError(GofrViewError):
    """Raised when no candidate path exists for a logical template name."""

    def __init__(self, kind: ViewKind, name: str, searched: Optional[Sequence[Path]] = None):
        """
        Args:
            kind: Phase the template was requested for (view, layout, partial)
            name: Logical template name that was looked up
            searched: Candidate paths that were checked, in priority order
        """
        searched_paths: List[str] = [str(path) for path in searched or []]
        super().__init__(
            code="VIEW_NOT_FOUND",
            message=f"{kind.value} '{name}' not found",
            details={"kind": kind.value, "name": name, "searched": searched_paths},
        )
        self.kind = kind
        self.name = name
        self.searched = searched_paths


class ReadFailureError(GofrViewError):
    """Raised when a resolved template file exists but cannot be read."""

    def __init__(self, path: Union[str, Path], reason: str = ""):
        message = f"template file '{path}' could not be read"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            code="READ_FAILURE",
            message=message,
            details={"path": str(path), "reason": reason},
        )
        self.path = str(path)
