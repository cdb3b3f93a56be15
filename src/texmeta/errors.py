# src/texmeta/errors.py


class TexmetaError(Exception):
    """Base class for every error raised by texmeta."""


class GrammarError(TexmetaError, ValueError):
    """A production did not match at the expected position.

    `remainder` is the unconsumed input where the failure happened.
    """

    def __init__(self, message: str, remainder: bytes = b"") -> None:
        super().__init__(message)
        self.message = message
        self.remainder = remainder

    def __str__(self) -> str:
        if not self.remainder:
            return f"{self.message} at end of input"
        snippet = self.remainder[:30].decode("utf-8", errors="replace")
        return f"{self.message} at {snippet!r}"


class BibliographyNotFoundError(TexmetaError, KeyError):
    """A citation key has no entry in the bibliography."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"bibliography not found: {self.key}"
