"""View rendering: Jinja2 engine, composition helpers and the pipeline."""
from gofr_view.rendering.engine import TemplateEngine
from gofr_view.rendering.helpers import HelperTable, decode_model
from gofr_view.rendering.pipeline import ViewPipeline
from gofr_view.rendering.tags import COMPOSITION_TAGS, CompositionTagExtension

__all__ = [
    "TemplateEngine",
    "HelperTable",
    "decode_model",
    "ViewPipeline",
    "COMPOSITION_TAGS",
    "CompositionTagExtension",
]
