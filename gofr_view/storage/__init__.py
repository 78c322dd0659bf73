"""Template source storage."""
from gofr_view.storage.base import TemplateStorageBase
from gofr_view.storage.file_storage import LocalTemplateStorage

__all__ = ["TemplateStorageBase", "LocalTemplateStorage"]
