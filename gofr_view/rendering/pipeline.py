"""Multi-pass view rendering pipeline.

A page is produced in up to three kinds of pass over one RenderSession:

1. Body: the requested view runs first. Helpers it calls (``layout``,
   ``title``, ``meta``, ``style``, ``script``, ``render``) record state on the
   session while the body produces its own output.
2. Layout: if the body selected a layout, it runs next and reads back what
   the body recorded (``title()``, ``metas()``, ``body()``, ...).
3. Render: partials included with ``render`` from either phase, on demand
   and recursively. Each partial is read and compiled at most once per
   session, then executed once per call.
"""

from typing import Any, Optional

from jinja2 import Template

from gofr_view.config import ViewConfig
from gofr_view.exceptions import ReadFailureError, TemplateExecutionError
from gofr_view.logger import DefaultLogger, Logger
from gofr_view.models.view import ViewKind, ViewRequest
from gofr_view.rendering.engine import TemplateEngine
from gofr_view.rendering.helpers import HelperTable
from gofr_view.resolution import PathResolver, ResolvedTemplate
from gofr_view.sessions import MAX_RENDER_DEPTH, RenderSession, SessionState
from gofr_view.storage import LocalTemplateStorage, TemplateStorageBase


class ViewPipeline:
    """Orchestrates Body, Layout and partial Render phases."""

    def __init__(
        self,
        config: ViewConfig,
        logger: Optional[Logger] = None,
        engine: Optional[TemplateEngine] = None,
        storage: Optional[TemplateStorageBase] = None,
        resolver: Optional[PathResolver] = None,
    ):
        """
        Initialize the pipeline.

        Args:
            config: Connection configuration (delimiters, root, shared name)
            logger: Logger instance
            engine: Base engine; built from config when omitted
            storage: Template source storage (local filesystem by default)
            resolver: Path resolver; built over storage when omitted
        """
        self.config = config
        self.logger = logger or DefaultLogger()
        self.engine = engine or TemplateEngine.from_config(config)
        self.storage = storage or LocalTemplateStorage()
        self.resolver = resolver or PathResolver(self.storage, self.logger)

    def parse(self, request: ViewRequest) -> str:
        """
        Render a request to a complete HTML document.

        Args:
            request: View name (or inline source), language, site, data, helpers

        Returns:
            Layout output, or the body output when no layout was selected

        Raises:
            GofrViewError: If the body or layout cannot be resolved, read,
                compiled or executed
        """
        session = self.new_session(request)
        self.body(session, request.view, request.model)
        html = self.layout(session)

        self.logger.info(
            "View rendered",
            view="<inline>" if request.is_inline else request.view,
            layout=session.layout_name or None,
            partials=len(session.compiled_cache),
            session_id=session.session_id,
        )
        return html

    def new_session(self, request: ViewRequest) -> RenderSession:
        """Create a session with its own engine clone and bound helpers."""
        session = RenderSession(request, self.config)
        helpers = HelperTable(session, self, self.logger)

        # Caller helpers go first so system helpers overwrite same-named ones
        template_globals = dict(request.helpers)
        template_globals.update(helpers.as_globals())

        session.engine = self.engine.clone(helpers=template_globals, composition=helpers)
        return session

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------

    def body(self, session: RenderSession, name: str, model: Any = None) -> str:
        """
        Body phase: resolve, compile and execute the body view.

        The directory the body was found in becomes the session's current
        directory, so layouts and partials next to it take priority.
        """
        session.transition([SessionState.CREATED], SessionState.BODY_RENDERING)

        resolved = self.resolver.resolve(ViewKind.BODY, name, session.search_context())
        source = self._read_source(resolved)
        if resolved.directory is not None:
            session.current_dir = resolved.directory

        engine = session.engine.clone()
        template = engine.compile(resolved.template_name, source, self._filename(resolved))
        output = engine.execute(resolved.template_name, template, session.template_data(model))

        session.body_output = output
        next_state = SessionState.LAYOUT_SELECTED if session.has_layout else SessionState.NO_LAYOUT
        session.transition([SessionState.BODY_RENDERING], next_state)
        return output

    def layout(self, session: RenderSession) -> str:
        """
        Layout phase: wrap the body output in the selected layout.

        Without a selected layout the body output is returned unchanged.
        """
        if session.state is SessionState.NO_LAYOUT:
            session.transition([SessionState.NO_LAYOUT], SessionState.DONE)
            return session.body_output

        session.transition([SessionState.LAYOUT_SELECTED], SessionState.LAYOUT_RENDERING)

        resolved = self.resolver.resolve(
            ViewKind.LAYOUT, session.layout_name, session.search_context()
        )
        source = self._read_source(resolved)

        engine = session.engine.clone()
        template = engine.compile(resolved.template_name, source, self._filename(resolved))
        output = engine.execute(
            resolved.template_name, template, session.template_data(session.layout_model)
        )

        session.transition([SessionState.LAYOUT_RENDERING], SessionState.DONE)
        return output

    def render(self, session: RenderSession, name: str, model: Any = None) -> str:
        """
        Partial phase: render a partial with its own model.

        The compiled partial is cached on the session under its resolved
        name, so repeated includes read and compile the source once.

        Raises:
            GofrViewError: On resolution, read, compile or execution failure
        """
        session.require_rendering()
        if session.render_depth >= MAX_RENDER_DEPTH:
            raise TemplateExecutionError(
                name, f"partial nesting deeper than {MAX_RENDER_DEPTH} levels"
            )

        resolved = self.resolver.resolve(ViewKind.PARTIAL, name, session.search_context())
        template = self._cached_partial(session, resolved)

        session.render_depth += 1
        try:
            return session.engine.execute(
                resolved.template_name, template, session.template_data(model)
            )
        finally:
            session.render_depth -= 1

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _cached_partial(self, session: RenderSession, resolved: ResolvedTemplate) -> Template:
        template = session.cached_template(resolved.template_name)
        if template is not None:
            self.logger.debug(
                "Partial cache hit",
                name=resolved.template_name,
                session_id=session.session_id,
            )
            return template

        source = self._read_source(resolved)
        template = session.engine.compile(
            resolved.template_name, source, self._filename(resolved)
        )
        return session.cache_template(resolved.template_name, template)

    def _read_source(self, resolved: ResolvedTemplate) -> str:
        if resolved.source is not None:
            return resolved.source
        try:
            resolved.source = self.storage.read_text(resolved.path)
        except (OSError, UnicodeDecodeError) as e:
            raise ReadFailureError(resolved.path, str(e)) from e
        return resolved.source

    @staticmethod
    def _filename(resolved: ResolvedTemplate) -> Optional[str]:
        return str(resolved.path) if resolved.path is not None else None


__all__ = ["ViewPipeline"]
