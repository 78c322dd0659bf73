"""View request models."""

from enum import Enum
from typing import Any, Callable, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ViewKind(str, Enum):
    """Which pipeline phase a template is being resolved for."""

    BODY = "view"
    LAYOUT = "layout"
    PARTIAL = "partial"


class ViewRequest(BaseModel):
    """A single top-level render request.

    ``view`` is either a logical view name (``"users/profile"``) or, when it
    contains a newline, inline template source.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", arbitrary_types_allowed=True)

    view: str
    language: str = ""
    site: str = ""
    model: Any = None
    data: Dict[str, Any] = Field(default_factory=dict)
    helpers: Dict[str, Callable[..., Any]] = Field(default_factory=dict)

    @property
    def is_inline(self) -> bool:
        return "\n" in self.view


class ConnectionHealth(BaseModel):
    """Health snapshot reported by a view connection."""

    workload: int = 0


def model_or_default(model: Optional[Any]) -> Any:
    """Templates always see a ``model`` variable; missing models become ``{}``."""
    return {} if model is None else model
