# src/texmeta/rendering/abstract.py

from texmeta.parsers.models import Abstract, PartKind

from .citations import CitationRenderer
from .formats import Format


def render_abstract(
    abstract: Abstract, citations: CitationRenderer, fmt: Format
) -> bytes:
    """Render abstract parts in order. Text runs are copied byte for byte."""
    out = bytearray()
    for part in abstract.parts:
        if part.kind is PartKind.TEXT:
            out += part.value
        elif part.kind is PartKind.ITALIC:
            out += citations.render_italic(part.value, fmt)
        elif part.kind is PartKind.CITATION_YEAR:
            out += citations.render_year(part.value).encode()
        elif part.kind is PartKind.CITATION:
            out += citations.render_citation(part.value, fmt).encode()
        else:
            raise ValueError(f"Unknown abstract part kind: {part.kind}")
    return bytes(out)
