"""Composition tags for templates.

Adds one Jinja2 tag per composition helper so templates can write::

    {% layout "main" %}{% title "Home" %}{% meta "robots" "noindex" %}

and, in the layout::

    <title>{% title %}</title>{% metas %}{% body %}

Arguments follow the tag name separated by whitespace or commas. A string
literal is always a single argument (adjacent literals are not joined) and
may carry filters, ``{% title "hi"|upper %}``. Wrap other computed strings in
parentheses: ``{% title ("Hi " ~ user.name) %}``.

The tag looks its helper up on the environment it was compiled under rather
than in the template context, so request data can never shadow it.
"""

from typing import Any, List

from jinja2 import nodes
from jinja2.environment import Environment
from jinja2.ext import Extension
from jinja2.parser import Parser

COMPOSITION_TAGS = (
    "layout",
    "title",
    "author",
    "keywords",
    "description",
    "body",
    "render",
    "meta",
    "metas",
    "style",
    "styles",
    "script",
    "scripts",
)


class CompositionTagExtension(Extension):
    """Compiles ``{% <helper> args... %}`` into an output of the helper's result."""

    tags = set(COMPOSITION_TAGS)

    def __init__(self, environment: Environment):
        super().__init__(environment)
        environment.extend(composition_helpers=None)

    def parse(self, parser: Parser) -> nodes.Node:
        tag = next(parser.stream)
        args: List[nodes.Expr] = [nodes.Const(tag.value, lineno=tag.lineno)]

        while parser.stream.current.type != "block_end":
            if len(args) > 1 and parser.stream.skip_if("comma"):
                continue
            token = parser.stream.current
            if token.type == "string":
                next(parser.stream)
                literal = nodes.Const(token.value, lineno=token.lineno)
                args.append(parser.parse_filter(literal))
            else:
                args.append(parser.parse_expression())

        call = self.call_method("_invoke", args, lineno=tag.lineno)
        return nodes.Output([call], lineno=tag.lineno)

    def _invoke(self, tag: str, *args: Any) -> Any:
        helpers = self.environment.composition_helpers
        if helpers is None:
            raise RuntimeError(f"composition tag '{tag}' used outside a render session")
        return helpers.call(tag, *args)
