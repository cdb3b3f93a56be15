# src/texmeta/parsers/paragraph.py

from .scanner import PAR, skip_whitespace


def parse_paragraph(data: bytes) -> tuple[bytes, bytes]:
    """Read a field body up to the next `\\par`.

    Leading whitespace is skipped, the terminator is consumed and dropped.
    Without a terminator the whole remaining input is the body, which is
    how a trailing field such as `year=2022` ends a document.

    Returns (body, rest). The body is not trimmed on the right.
    """
    data = skip_whitespace(data)
    end = data.find(PAR)
    if end < 0:
        return data, b""
    return data[:end], data[end + len(PAR) :]
