"""gofr-view: layout-aware HTML view rendering on Jinja2."""

from gofr_view.config import ViewConfig
from gofr_view.driver import (
    DefaultViewDriver,
    ViewConnection,
    get_driver,
    list_drivers,
    register_driver,
)
from gofr_view.exceptions import GofrViewError
from gofr_view.models import ConnectionHealth, ViewKind, ViewRequest
from gofr_view.rendering import ViewPipeline

__version__ = "0.1.0"

__all__ = [
    "ViewConfig",
    "ViewRequest",
    "ViewKind",
    "ConnectionHealth",
    "ViewPipeline",
    "ViewConnection",
    "DefaultViewDriver",
    "register_driver",
    "get_driver",
    "list_drivers",
    "GofrViewError",
]
