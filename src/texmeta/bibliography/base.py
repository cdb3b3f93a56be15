# src/texmeta/bibliography/base.py

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class BibEntry:
    """A bibliography record: a citation key and its tags in source order."""

    key: str
    fields: tuple[tuple[str, str], ...]
    entry_type: str | None = None

    def tags(self) -> tuple[tuple[str, str], ...]:
        return self.fields

    def tag(self, name: str) -> str | None:
        """Value of the first tag called `name`, or None."""
        for tag_name, value in self.fields:
            if tag_name == name:
                return value
        return None


class Bibliography(Protocol):
    def lookup(self, key: str) -> BibEntry | None:
        """Exact-match lookup by citation key."""
        ...

    def __len__(self) -> int: ...
