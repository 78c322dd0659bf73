"""Composition helpers bound to one render session.

Helpers are the only way templates change session state. Setters return
empty output so they can sit anywhere in a body template; getters return
``Markup`` so stored values are embedded unescaped.
"""

import json
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Mapping

from markupsafe import Markup

from gofr_view.exceptions import GofrViewError, ModelDecodeError
from gofr_view.logger import Logger
from gofr_view.resolution import is_inline_source
from gofr_view.sessions import RenderSession

if TYPE_CHECKING:
    from gofr_view.rendering.pipeline import ViewPipeline

DEFAULT_SCRIPT_TYPE = "text/javascript"

_EMPTY = Markup("")


def decode_model(value: str) -> Dict[str, Any]:
    """
    Decode a JSON-encoded layout model.

    Raises:
        ModelDecodeError: If the text is not a JSON object
    """
    try:
        decoded = json.loads(value)
    except ValueError as e:
        raise ModelDecodeError(str(e)) from e
    if not isinstance(decoded, dict):
        raise ModelDecodeError(f"expected a JSON object, got {type(decoded).__name__}")
    return decoded


class HelperTable:
    """The composition helpers for one RenderSession."""

    def __init__(self, session: RenderSession, pipeline: "ViewPipeline", logger: Logger):
        self.session = session
        self.pipeline = pipeline
        self.logger = logger
        self._helpers: Dict[str, Callable[..., Any]] = {
            "layout": self.layout,
            "title": self.title,
            "author": self.author,
            "keywords": self.keywords,
            "description": self.description,
            "body": self.body,
            "render": self.render,
            "meta": self.meta,
            "metas": self.metas,
            "style": self.style,
            "styles": self.styles,
            "script": self.script,
            "scripts": self.scripts,
        }

    def as_globals(self) -> Dict[str, Callable[..., Any]]:
        return dict(self._helpers)

    def call(self, name: str, *args: Any) -> Any:
        """Dispatch a composition tag to its helper."""
        return self._helpers[name](*args)

    # ------------------------------------------------------------------
    # Layout selection
    # ------------------------------------------------------------------

    def layout(self, name: str, *models: Any) -> Markup:
        """Select the layout for this session; the last call wins.

        The model may be a mapping or a JSON object string. Models that fail
        to decode are skipped and the layout gets an empty model.
        """
        model: Any = {}
        for value in models:
            if isinstance(value, Mapping):
                model = value
                break
            if isinstance(value, str):
                try:
                    model = decode_model(value)
                    break
                except ModelDecodeError as e:
                    self.logger.warning(
                        "Ignoring layout model",
                        layout=name,
                        session_id=self.session.session_id,
                        error=str(e),
                    )
        self.session.select_layout(name, model)
        return _EMPTY

    # ------------------------------------------------------------------
    # Head values (get with no argument, set with one)
    # ------------------------------------------------------------------

    def title(self, *args: Any) -> Markup:
        return self._head_value("title", args)

    def author(self, *args: Any) -> Markup:
        return self._head_value("author", args)

    def keywords(self, *args: Any) -> Markup:
        return self._head_value("keywords", args)

    def description(self, *args: Any) -> Markup:
        return self._head_value("description", args)

    def _head_value(self, field: str, args: tuple) -> Markup:
        if args:
            setattr(self.session.head, field, str(args[0]))
            return _EMPTY
        return Markup(getattr(self.session.head, field))

    # ------------------------------------------------------------------
    # Body and partials
    # ------------------------------------------------------------------

    def body(self) -> Markup:
        return Markup(self.session.body_output)

    def render(self, name: str, *models: Any) -> Markup:
        """Render a partial inline; failures become visible error text."""
        model = models[0] if models else None
        try:
            return Markup(self.pipeline.render(self.session, name, model))
        except GofrViewError as e:
            self.logger.warning(
                "Partial render failed",
                partial="<inline>" if is_inline_source(name) else name,
                session_id=self.session.session_id,
                error=str(e),
            )
            return Markup("render error: {}").format(str(e))

    # ------------------------------------------------------------------
    # Accumulated head elements
    # ------------------------------------------------------------------

    def meta(self, name: str, content: str, http_equiv: bool = False) -> Markup:
        if http_equiv:
            element = Markup('<meta http-equiv="{}" content="{}" />').format(name, content)
        else:
            element = Markup('<meta name="{}" content="{}" />').format(name, content)
        self.session.head.metas.append(element)
        return _EMPTY

    def metas(self) -> Markup:
        return _join(self.session.head.metas)

    def style(self, path: str, media: str = "") -> Markup:
        if media:
            element = Markup(
                '<link type="text/css" rel="stylesheet" href="{}" media="{}" />'
            ).format(path, media)
        else:
            element = Markup('<link type="text/css" rel="stylesheet" href="{}" />').format(path)
        self.session.head.styles.append(element)
        return _EMPTY

    def styles(self) -> Markup:
        return _join(self.session.head.styles)

    def script(self, path: str, type: str = DEFAULT_SCRIPT_TYPE) -> Markup:
        element = Markup('<script type="{}" src="{}"></script>').format(type, path)
        self.session.head.scripts.append(element)
        return _EMPTY

    def scripts(self) -> Markup:
        return _join(self.session.head.scripts)


def _join(elements: List[Markup]) -> Markup:
    return Markup("\n").join(elements)
