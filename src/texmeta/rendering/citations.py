# src/texmeta/rendering/citations.py

import logging

from texmeta.bibliography.base import BibEntry, Bibliography
from texmeta.errors import BibliographyNotFoundError
from texmeta.observability import names
from texmeta.observability.base import MetricsHook, NoOpMetricsHook

from .config import RenderConfig
from .formats import Format

logger = logging.getLogger(__name__)


class CitationRenderer:
    """Resolves citation keys against a bibliography and formats them.

    `\\citeyear{key}` renders as `(YEAR)` and `\\cite{key}` as
    `(AUTHOR, YEAR)`. A key missing from the bibliography raises
    BibliographyNotFoundError; a missing tag falls back instead.
    """

    def __init__(
        self,
        bibliography: Bibliography,
        config: RenderConfig | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.bibliography = bibliography
        self.config = config or RenderConfig()
        self.metrics_hook = metrics_hook

    def render_italic(self, text: bytes, fmt: Format) -> bytes:
        return fmt.italic_bytes(text)

    def render_year(self, key: bytes | str) -> str:
        entry = self._lookup(key, kind="citeyear")
        return f"({self._year(entry)})"

    def render_citation(self, key: bytes | str, fmt: Format) -> str:
        entry = self._lookup(key, kind="cite")
        author = self._author(entry, fmt)
        year = self._year(entry)
        return f"({author.strip().upper()}, {year.strip()})"

    def _lookup(self, key: bytes | str, kind: str) -> BibEntry:
        if isinstance(key, bytes):
            key = key.decode("utf-8", errors="replace")

        entry = self.bibliography.lookup(key)
        if entry is None:
            logger.error("Citation key not in bibliography: %s", key)
            self.metrics_hook.increment(
                names.CITATIONS_UNRESOLVED_TOTAL, labels={"kind": kind}
            )
            raise BibliographyNotFoundError(key)

        logger.debug("Resolved %s citation: %s", kind, key)
        self.metrics_hook.increment(names.CITATIONS_RESOLVED_TOTAL, labels={"kind": kind})
        return entry

    def _year(self, entry: BibEntry) -> str:
        year = entry.tag("year")
        if year is None:
            return self.config.missing_year
        return year

    def _author(self, entry: BibEntry, fmt: Format) -> str:
        """Surname display string, before trimming and upper-casing.

        Precedence: surnames from `author`, then the first word of
        `title`, then an empty string.
        """
        authors = entry.tag("author")
        if authors is not None:
            surnames = [
                name.split(",", 1)[0]
                for name in authors.split(self.config.author_separator)
            ]
            if len(surnames) > self.config.et_al_threshold:
                return f"{surnames[0]}, {fmt.italic(self.config.et_al)}"
            if len(surnames) > 1:
                return self.config.surname_joiner.join(surnames)
            return surnames[0]

        title = entry.tag("title")
        if title is not None:
            words = title.split(maxsplit=1)
            return words[0] if words else ""

        return ""
