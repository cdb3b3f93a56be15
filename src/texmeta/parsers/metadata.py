# src/texmeta/parsers/metadata.py

import logging
from typing import Any

from texmeta.errors import GrammarError

from .abstract import parse_abstract
from .author import parse_authors
from .models import FieldKey, MetadataRecord
from .paragraph import parse_paragraph
from .scanner import PAR, expect, match_any, skip_whitespace

logger = logging.getLogger(__name__)

_KEYWORDS: dict[bytes, FieldKey] = {key.value.encode(): key for key in FieldKey}


def parse_divisor(data: bytes) -> bytes:
    """Consume `=` with optional whitespace around it."""
    data = skip_whitespace(data)
    data = expect(data, b"=")
    return skip_whitespace(data)


def _parse_value(key: FieldKey, data: bytes) -> tuple[Any, bytes]:
    if key is FieldKey.AUTHORS:
        authors, data = parse_authors(data)
        _, data = parse_paragraph(data)
        return tuple(authors), data

    if key is FieldKey.ABSTRACT:
        summary, data = parse_abstract(data)
        _, data = parse_paragraph(data)
        return summary, data

    return parse_paragraph(data)


def parse_metadata(data: bytes) -> tuple[MetadataRecord, bytes]:
    """Parse `key=value\\par` fields in any order until no keyword matches.

    A repeated key overwrites the earlier value. Bare `\\par` markers
    between fields are skipped. Returns (record, rest); `rest` starts at
    the first position where no keyword was found.
    """
    alternatives = (*_KEYWORDS, PAR)
    values: dict[str, Any] = {}

    while True:
        try:
            keyword, rest = match_any(skip_whitespace(data), alternatives)
        except GrammarError:
            break

        if keyword == PAR:
            data = rest
            continue

        key = _KEYWORDS[keyword]
        try:
            rest = parse_divisor(rest)
        except GrammarError as e:
            raise GrammarError(f"expected '=' after {key.value!r}", e.remainder) from e

        values[key.value], data = _parse_value(key, rest)
        logger.debug("Parsed field: %s", key.value)

    return MetadataRecord(**values), data


def parse_document(data: bytes) -> MetadataRecord:
    """Parse a whole metadata document; only whitespace may be left over."""
    record, rest = parse_metadata(data)
    rest = skip_whitespace(rest)
    if rest:
        raise GrammarError("unexpected content after last field", rest)
    return record
