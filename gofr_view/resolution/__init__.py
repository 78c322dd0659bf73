"""Template path resolution."""
from gofr_view.resolution.resolver import (
    PathResolver,
    ResolvedTemplate,
    SearchContext,
    candidate_paths,
    generate_inline_name,
    is_inline_source,
)

__all__ = [
    "PathResolver",
    "ResolvedTemplate",
    "SearchContext",
    "candidate_paths",
    "generate_inline_name",
    "is_inline_source",
]
