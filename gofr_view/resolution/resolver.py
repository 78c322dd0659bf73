"""Cascading template path resolution.

A logical template name is looked up in a fixed cascade of directories,
most specific first: site and language scoped directories, then language,
then site, then the shared subtree, then the template root itself. When the
body view has already been found, its directory is tried before anything
else so co-located layouts and partials override global ones.
"""

import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from gofr_view.exceptions import ViewNotFoundError
from gofr_view.logger import DefaultLogger, Logger
from gofr_view.models.view import ViewKind
from gofr_view.storage import LocalTemplateStorage, TemplateStorageBase

TEMPLATE_SUFFIX = ".html"
INDEX_FILE = "index.html"

# Each scope is a sequence of context segments placed between root and the
# template name. A scope is skipped when any of its segments is empty.
_BODY_CASCADE: Tuple[Tuple[str, ...], ...] = (
    ("site", "language"),
    ("site", "shared", "language"),
    ("language",),
    ("language", "shared"),
    ("site",),
    ("site", "shared"),
    ("shared",),
    (),
)

_LAYOUT_CASCADE: Tuple[Tuple[str, ...], ...] = (
    ("site", "language"),
    ("site", "language", "shared"),
    ("language",),
    ("language", "shared"),
    ("site",),
    ("site", "shared"),
    ("shared",),
    (),
)

CASCADES: Dict[ViewKind, Tuple[Tuple[str, ...], ...]] = {
    ViewKind.BODY: _BODY_CASCADE,
    ViewKind.LAYOUT: _LAYOUT_CASCADE,
    ViewKind.PARTIAL: _LAYOUT_CASCADE,
}


@dataclass(frozen=True)
class SearchContext:
    """Request-scoped inputs to the candidate cascade."""

    root: Path
    language: str = ""
    site: str = ""
    shared: str = "shared"
    current_dir: Optional[Path] = None

    def segment(self, key: str) -> str:
        return getattr(self, key)


@dataclass
class ResolvedTemplate:
    """A logical template name paired with where its source comes from."""

    kind: ViewKind
    logical_name: str
    template_name: str
    path: Optional[Path] = None
    source: Optional[str] = None

    @property
    def inline(self) -> bool:
        return self.path is None

    @property
    def directory(self) -> Optional[Path]:
        return self.path.parent if self.path is not None else None


def is_inline_source(name: str) -> bool:
    """Names containing a newline are template source, not paths."""
    return "\n" in name


def generate_inline_name() -> str:
    return f"inline-{uuid.uuid4().hex}"


def candidate_paths(kind: ViewKind, name: str, ctx: SearchContext) -> List[Path]:
    """
    Build the ordered candidate list for a logical template name.

    Pure function: no filesystem access.

    Args:
        kind: Phase the template is resolved for
        name: Logical template name, without the .html suffix
        ctx: Root, language, site, shared name and optional current directory

    Returns:
        Candidate paths, most specific first, without duplicates
    """
    filename = f"{name}{TEMPLATE_SUFFIX}"
    candidates: List[Path] = []

    if ctx.current_dir is not None:
        candidates.append(ctx.current_dir / filename)

    for scope in CASCADES[kind]:
        segments = [ctx.segment(key) for key in scope]
        if not all(segments):
            continue
        base = ctx.root.joinpath(*segments)
        candidates.append(base / filename)
        if kind is ViewKind.BODY:
            # Directory-style views: users/ -> users/index.html
            candidates.append(base / name / INDEX_FILE)

    unique: List[Path] = []
    seen = set()
    for path in candidates:
        if path not in seen:
            seen.add(path)
            unique.append(path)
    return unique


class PathResolver:
    """Resolves logical template names against template storage."""

    def __init__(
        self,
        storage: Optional[TemplateStorageBase] = None,
        logger: Optional[Logger] = None,
        name_generator: Optional[Callable[[], str]] = None,
    ):
        self.storage = storage or LocalTemplateStorage()
        self.logger = logger or DefaultLogger()
        self.name_generator = name_generator or generate_inline_name

    def find(self, kind: ViewKind, name: str, ctx: SearchContext) -> Optional[Path]:
        """Return the first candidate that is an existing regular file, or None."""
        return self._first_existing(candidate_paths(kind, name, ctx))

    def resolve(self, kind: ViewKind, name: str, ctx: SearchContext) -> ResolvedTemplate:
        """
        Resolve a logical name (or inline source) to a ResolvedTemplate.

        Inline sources never reach storage; they get a generated name so they
        cannot collide with file-backed templates.

        Raises:
            ViewNotFoundError: If no candidate path exists
        """
        if is_inline_source(name):
            return ResolvedTemplate(
                kind=kind,
                logical_name=name,
                template_name=self.name_generator(),
                source=name,
            )

        candidates = candidate_paths(kind, name, ctx)
        path = self._first_existing(candidates)
        if path is None:
            self.logger.debug(
                "Template not found", kind=kind.value, name=name, candidates=len(candidates)
            )
            raise ViewNotFoundError(kind, name, searched=candidates)

        self.logger.debug("Template resolved", kind=kind.value, name=name, path=str(path))
        return ResolvedTemplate(
            kind=kind,
            logical_name=name,
            template_name=str(path),
            path=path,
        )

    def _first_existing(self, candidates: Sequence[Path]) -> Optional[Path]:
        for path in candidates:
            if self.storage.is_file(path):
                return path
        return None
