"""Data models shared across gofr-view."""
from gofr_view.models.view import ConnectionHealth, ViewKind, ViewRequest, model_or_default

__all__ = ["ConnectionHealth", "ViewKind", "ViewRequest", "model_or_default"]
