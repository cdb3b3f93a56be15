from .abstract import render_abstract
from .citations import CitationRenderer
from .config import RenderConfig, load_render_config
from .formats import Format
from .record import RecordRenderer, render_record

__all__ = [
    "CitationRenderer",
    "Format",
    "RecordRenderer",
    "RenderConfig",
    "load_render_config",
    "render_abstract",
    "render_record",
]
