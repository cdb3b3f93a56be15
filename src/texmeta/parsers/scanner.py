# src/texmeta/parsers/scanner.py

from texmeta.errors import GrammarError

WHITESPACE = b" \t\r\n"

# Field terminator and bare separator between fields
PAR = b"\\par"

ESCAPE = b"\\"


def skip_whitespace(data: bytes) -> bytes:
    """Drop leading spaces, tabs, CR and LF. Never fails."""
    return data.lstrip(WHITESPACE)


def expect(data: bytes, literal: bytes, what: str | None = None) -> bytes:
    """Consume `literal` at the start of `data` or raise GrammarError."""
    if not data.startswith(literal):
        raise GrammarError(f"expected {what or literal.decode()!r}", data)
    return data[len(literal) :]


def match_any(data: bytes, literals: tuple[bytes, ...]) -> tuple[bytes, bytes]:
    """Consume the first of `literals` that prefixes `data`.

    Tried in the given order. Returns (literal, rest).
    """
    for literal in literals:
        if data.startswith(literal):
            return literal, data[len(literal) :]
    names = ", ".join(repr(lit.decode()) for lit in literals)
    raise GrammarError(f"expected one of {names}", data)
