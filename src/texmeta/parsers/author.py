# src/texmeta/parsers/author.py

import logging
import re

from texmeta.errors import GrammarError

from .models import Author
from .scanner import expect, match_any, skip_whitespace

logger = logging.getLogger(__name__)

GIVEN = b"given"
FAMILY = b"family"

# A name runs up to ",", "." or a backslash; a trailing "," or "." is swallowed
_NAME_RE = re.compile(rb"[^,.\\]+")


def _parse_name(data: bytes) -> tuple[bytes, bytes]:
    match = _NAME_RE.match(data)
    if match is None:
        raise GrammarError("expected a name", data)

    name, rest = match.group(), data[match.end() :]
    if rest[:1] in (b",", b"."):
        rest = rest[1:]
    return name, rest


def _parse_part(data: bytes) -> tuple[bytes, bytes, bytes]:
    """Parse `given > name` or `family > name`. Returns (label, name, rest)."""
    data = skip_whitespace(data)
    label, data = match_any(data, (GIVEN, FAMILY))
    data = skip_whitespace(data)
    data = expect(data, b">")
    data = skip_whitespace(data)
    name, data = _parse_name(data)
    return label, name, data


def parse_author(data: bytes) -> tuple[Author, bytes]:
    """Parse one author entry made of a `given` part and a `family` part.

    The two parts may come in either order, each exactly once.
    """
    first_label, first, rest = _parse_part(data)
    second_label, second, rest = _parse_part(rest)

    if first_label == GIVEN and second_label == FAMILY:
        return Author(given=first, family=second), rest
    if first_label == FAMILY and second_label == GIVEN:
        return Author(given=second, family=first), rest
    raise GrammarError("author needs exactly one 'given' and one 'family'", data)


def parse_authors(data: bytes) -> tuple[list[Author], bytes]:
    """Parse one or more author entries, stopping at the first that fails."""
    author, data = parse_author(data)
    authors = [author]
    while True:
        try:
            author, data = parse_author(data)
        except GrammarError:
            break
        authors.append(author)

    logger.debug("Parsed %d authors", len(authors))
    return authors, data
