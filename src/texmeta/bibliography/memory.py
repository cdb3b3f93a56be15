# src/texmeta/bibliography/memory.py

import logging
from collections.abc import Iterable, Mapping

from .base import BibEntry

logger = logging.getLogger(__name__)


class InMemoryBibliography:
    """Dictionary-backed bibliography. The first entry seen for a key wins."""

    def __init__(self, entries: Iterable[BibEntry] = ()) -> None:
        self._entries: dict[str, BibEntry] = {}
        for entry in entries:
            if entry.key in self._entries:
                logger.warning("Duplicate citation key ignored: %s", entry.key)
                continue
            self._entries[entry.key] = entry

    @classmethod
    def from_mapping(
        cls, mapping: Mapping[str, Mapping[str, str]]
    ) -> "InMemoryBibliography":
        """Build from `{key: {tag: value}}`, keeping tag order."""
        return cls(
            BibEntry(key=key, fields=tuple(tags.items()))
            for key, tags in mapping.items()
        )

    def lookup(self, key: str) -> BibEntry | None:
        return self._entries.get(key)

    def keys(self) -> list[str]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries
