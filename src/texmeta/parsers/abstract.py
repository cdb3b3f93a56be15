# src/texmeta/parsers/abstract.py

import logging
import re

from texmeta.errors import GrammarError

from .models import Abstract, AbstractPart, PartKind
from .scanner import ESCAPE, expect, match_any, skip_whitespace

logger = logging.getLogger(__name__)

# Tried in this order, so `citeyear` wins over its prefix `cite`
COMMANDS: dict[bytes, PartKind] = {
    b"textit": PartKind.ITALIC,
    b"citeyear": PartKind.CITATION_YEAR,
    b"cite": PartKind.CITATION,
}

_TEXT_RE = re.compile(rb"[^\\]+")
_BRACED_RE = re.compile(rb"\{([^}]+)\}")
_BARE_RE = re.compile(rb"[^ \t\r\n]+")


def parse_block(data: bytes) -> tuple[bytes, bytes]:
    """Parse a command argument: `{...}` with the braces stripped, or a bare word."""
    match = _BRACED_RE.match(data)
    if match is not None:
        return match.group(1), data[match.end() :]

    match = _BARE_RE.match(data)
    if match is not None:
        return match.group(), data[match.end() :]

    raise GrammarError("expected a command argument", data)


def parse_command(data: bytes) -> tuple[AbstractPart, bytes]:
    data = skip_whitespace(data)
    data = expect(data, ESCAPE, "\\")
    name, data = match_any(data, tuple(COMMANDS))
    data = skip_whitespace(data)
    argument, data = parse_block(data)
    return AbstractPart(kind=COMMANDS[name], value=argument), data


def _parse_text(data: bytes) -> tuple[AbstractPart, bytes] | None:
    match = _TEXT_RE.match(data)
    if match is None:
        return None
    return AbstractPart(kind=PartKind.TEXT, value=match.group()), data[match.end() :]


def parse_abstract(data: bytes) -> tuple[Abstract, bytes]:
    """Split an abstract into text runs and `\\textit`/`\\citeyear`/`\\cite` commands.

    Stops without error at the first position where neither a text run nor
    a known command matches (a `\\par`, an unknown command, end of input)
    and returns that position as the remainder.
    """
    parts: list[AbstractPart] = []
    while data:
        parsed = _parse_text(data)
        if parsed is None:
            try:
                parsed = parse_command(data)
            except GrammarError:
                break
        part, data = parsed
        parts.append(part)

    logger.debug("Parsed abstract with %d parts", len(parts))
    return Abstract(parts=tuple(parts)), data
