"""Jinja2 compilation and execution for view templates."""

from typing import Any, Callable, Mapping, Optional

import jinja2
from jinja2 import Environment, StrictUndefined, Template

from gofr_view.config import ViewConfig
from gofr_view.exceptions import GofrViewError, TemplateExecutionError, TemplateSyntaxError
from gofr_view.rendering.tags import CompositionTagExtension


class TemplateEngine:
    """Wraps one Jinja2 environment.

    The connection owns a base engine built from its config. Every render
    session works on a clone (a Jinja2 overlay environment with its own
    globals), so helpers bound to one session are never visible to another
    and nothing is shared that a session can mutate.
    """

    def __init__(self, environment: Environment):
        self.environment = environment

    @classmethod
    def from_config(cls, config: ViewConfig) -> "TemplateEngine":
        """
        Build the connection-level base engine.

        Args:
            config: Connection configuration (delimiters, autoescape)

        Returns:
            TemplateEngine with composition tags enabled
        """
        environment = Environment(
            block_start_string=config.left,
            block_end_string=config.right,
            autoescape=config.autoescape,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            extensions=[CompositionTagExtension],
        )
        return cls(environment)

    def clone(
        self,
        helpers: Optional[Mapping[str, Callable[..., Any]]] = None,
        composition: Optional[Any] = None,
    ) -> "TemplateEngine":
        """
        Create an isolated copy of this engine.

        Args:
            helpers: Extra template globals for the clone only
            composition: Helper table the composition tags dispatch to

        Returns:
            New TemplateEngine over an overlay environment
        """
        environment = self.environment.overlay()
        environment.globals = dict(self.environment.globals)
        if helpers:
            environment.globals.update(helpers)
        if composition is not None:
            environment.composition_helpers = composition
        return TemplateEngine(environment)

    def compile(self, name: str, source: str, filename: Optional[str] = None) -> Template:
        """
        Compile template source under this engine.

        Raises:
            TemplateSyntaxError: If Jinja2 rejects the source
        """
        try:
            code = self.environment.compile(source, name=name, filename=filename)
        except jinja2.TemplateSyntaxError as e:
            detail = f"line {e.lineno}: {e.message}" if e.lineno else str(e.message)
            raise TemplateSyntaxError(name, detail) from e

        return self.environment.template_class.from_code(
            self.environment, code, self.environment.make_globals(None)
        )

    def execute(self, name: str, template: Template, data: Mapping[str, Any]) -> str:
        """
        Render a compiled template against a data mapping.

        Raises:
            TemplateExecutionError: If rendering fails
        """
        try:
            return template.render(dict(data))
        except GofrViewError:
            raise
        except Exception as e:
            raise TemplateExecutionError(name, f"{type(e).__name__}: {e}") from e
