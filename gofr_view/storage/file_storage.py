"""Local filesystem storage for template sources."""

from pathlib import Path

from gofr_view.storage.base import TemplateStorageBase


class LocalTemplateStorage(TemplateStorageBase):
    """Reads templates straight from the local filesystem.

    Reads are synchronous; a stalled read stalls the render that asked for it.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def is_file(self, path: Path) -> bool:
        # Any stat failure (name too long, permission denied) means absent
        try:
            return path.is_file()
        except OSError:
            return False

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding=self.encoding)
