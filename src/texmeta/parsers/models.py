# src/texmeta/parsers/models.py

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Author:
    given: bytes
    family: bytes


class PartKind(str, Enum):
    """Kind of an abstract fragment."""

    TEXT = "text"
    ITALIC = "textit"
    CITATION_YEAR = "citeyear"
    CITATION = "cite"


@dataclass(frozen=True)
class AbstractPart:
    """One fragment of an abstract.

    `value` holds the raw text for TEXT and ITALIC, and the citation key
    for CITATION_YEAR and CITATION.
    """

    kind: PartKind
    value: bytes


@dataclass(frozen=True)
class Abstract:
    parts: tuple[AbstractPart, ...]


class FieldKey(str, Enum):
    """Keywords accepted on the left side of `key=value`."""

    AUTHORS = "authors"
    TITLE = "title"
    FIRST_PAGE = "first_page"
    LAST_PAGE = "last_page"
    ABSTRACT = "abstract"
    KEYWORDS = "keywords"
    SECTION = "section"
    NUMBER = "number"
    SEMESTER = "semester"
    YEAR = "year"


@dataclass(frozen=True)
class MetadataRecord:
    """Aggregate of every field found in a metadata document.

    Absent fields are None. Scalar fields keep the raw bytes of the
    source, untrimmed.
    """

    authors: tuple[Author, ...] | None = None
    title: bytes | None = None
    first_page: bytes | None = None
    last_page: bytes | None = None
    abstract: Abstract | None = None
    keywords: bytes | None = None
    section: bytes | None = None
    number: bytes | None = None
    semester: bytes | None = None
    year: bytes | None = None
