from .abstract import parse_abstract
from .author import parse_author, parse_authors
from .base import DocumentParser
from .metadata import parse_document, parse_metadata
from .metadata_parser import MetadataParser
from .models import Abstract, AbstractPart, Author, FieldKey, MetadataRecord, PartKind
from .paragraph import parse_paragraph
from .scanner import skip_whitespace

__all__ = [
    # Parsers
    "DocumentParser",
    "MetadataParser",
    # Grammar functions
    "parse_abstract",
    "parse_author",
    "parse_authors",
    "parse_document",
    "parse_metadata",
    "parse_paragraph",
    "skip_whitespace",
    # Models
    "Abstract",
    "AbstractPart",
    "Author",
    "FieldKey",
    "MetadataRecord",
    "PartKind",
]
