# Bibliography
from .bibliography import (
    BibEntry,
    Bibliography,
    InMemoryBibliography,
    load_bibtex,
    load_bibtex_file,
)

# Errors
from .errors import BibliographyNotFoundError, GrammarError, TexmetaError

# Observability
from .observability import MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import (
    Abstract,
    AbstractPart,
    Author,
    MetadataParser,
    MetadataRecord,
    PartKind,
    parse_document,
    parse_metadata,
)

# Rendering
from .rendering import (
    CitationRenderer,
    Format,
    RecordRenderer,
    RenderConfig,
    load_render_config,
    render_record,
)

__all__ = [
    # Bibliography
    "BibEntry",
    "Bibliography",
    "InMemoryBibliography",
    "load_bibtex",
    "load_bibtex_file",
    # Errors
    "BibliographyNotFoundError",
    "GrammarError",
    "TexmetaError",
    # Observability
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "Abstract",
    "AbstractPart",
    "Author",
    "MetadataParser",
    "MetadataRecord",
    "PartKind",
    "parse_document",
    "parse_metadata",
    # Rendering
    "CitationRenderer",
    "Format",
    "RecordRenderer",
    "RenderConfig",
    "load_render_config",
    "render_record",
]
