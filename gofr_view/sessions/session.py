"""Render session: mutable composition state for one top-level render."""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional

from jinja2 import Template
from markupsafe import Markup

from gofr_view.config import ViewConfig
from gofr_view.exceptions import InvalidSessionStateError
from gofr_view.models.view import ViewRequest, model_or_default
from gofr_view.resolution import SearchContext

if TYPE_CHECKING:
    from gofr_view.rendering.engine import TemplateEngine

# Nested render() calls deeper than this fail instead of recursing forever
MAX_RENDER_DEPTH = 32


class SessionState(str, Enum):
    CREATED = "created"
    BODY_RENDERING = "body_rendering"
    LAYOUT_SELECTED = "layout_selected"
    NO_LAYOUT = "no_layout"
    LAYOUT_RENDERING = "layout_rendering"
    DONE = "done"


# Phases during which templates execute and render() may be called
RENDERING_STATES = (SessionState.BODY_RENDERING, SessionState.LAYOUT_RENDERING)


@dataclass
class HeadElements:
    """Head-level values collected by helpers across phases."""

    title: str = ""
    author: str = ""
    keywords: str = ""
    description: str = ""
    metas: List[Markup] = field(default_factory=list)
    styles: List[Markup] = field(default_factory=list)
    scripts: List[Markup] = field(default_factory=list)


class RenderSession:
    """State owned by exactly one top-level render call.

    Body runs to completion (nested renders included) before Layout starts,
    so helpers mutate this object without any locking. A session is never
    reused: every phase checks and advances ``state``.
    """

    def __init__(
        self,
        request: ViewRequest,
        config: ViewConfig,
        session_id: Optional[str] = None,
    ) -> None:
        self.session_id = session_id or str(uuid.uuid4())
        self.request = request
        self.config = config
        self.state = SessionState.CREATED

        # Set by the pipeline once the helper table is bound
        self.engine: Optional["TemplateEngine"] = None

        self.layout_name = ""
        self.layout_model: Any = {}
        self.body_output = ""
        self.current_dir: Optional[Path] = None
        self.head = HeadElements()
        self.compiled_cache: Dict[str, Template] = {}
        self.render_depth = 0

    def search_context(self) -> SearchContext:
        return SearchContext(
            root=self.config.root_path,
            language=self.request.language,
            site=self.request.site,
            shared=self.config.shared,
            current_dir=self.current_dir,
        )

    def template_data(self, model: Any) -> Dict[str, Any]:
        """Request data plus the phase's model under the ``model`` key."""
        data = dict(self.request.data)
        data["model"] = model_or_default(model)
        return data

    def transition(self, allowed: Iterable[SessionState], new_state: SessionState) -> None:
        """Advance the state machine, rejecting out-of-order phases."""
        allowed = tuple(allowed)
        if self.state not in allowed:
            raise InvalidSessionStateError(
                f"Session {self.session_id} cannot move to '{new_state.value}' "
                f"from '{self.state.value}'",
                details={
                    "session_id": self.session_id,
                    "state": self.state.value,
                    "target": new_state.value,
                },
            )
        self.state = new_state

    def require_rendering(self) -> None:
        if self.state not in RENDERING_STATES:
            raise InvalidSessionStateError(
                f"Session {self.session_id} is not rendering (state '{self.state.value}')",
                details={"session_id": self.session_id, "state": self.state.value},
            )

    def cached_template(self, name: str) -> Optional[Template]:
        return self.compiled_cache.get(name)

    def cache_template(self, name: str, template: Template) -> Template:
        """Add a compiled template; an existing entry is kept and returned."""
        return self.compiled_cache.setdefault(name, template)

    def select_layout(self, name: str, model: Any) -> None:
        self.layout_name = name
        self.layout_model = model_or_default(model)

    @property
    def has_layout(self) -> bool:
        return self.layout_name != ""
