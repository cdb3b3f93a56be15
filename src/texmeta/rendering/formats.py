# src/texmeta/rendering/formats.py

from enum import Enum


class Format(str, Enum):
    """Output flavor for abstracts and citations."""

    MARKDOWN = "markdown"
    PLAIN_TEXT = "plain_text"

    def italic(self, text: str) -> str:
        if self is Format.MARKDOWN:
            return f"_{text}_"
        return text

    def italic_bytes(self, text: bytes) -> bytes:
        if self is Format.MARKDOWN:
            return b"_" + text + b"_"
        return text
