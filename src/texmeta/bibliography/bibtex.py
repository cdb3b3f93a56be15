# src/texmeta/bibliography/bibtex.py

import logging
from pathlib import Path

import bibtexparser
from bibtexparser.bparser import BibTexParser

from texmeta.observability import names
from texmeta.observability.base import MetricsHook, NoOpMetricsHook

from .base import BibEntry
from .memory import InMemoryBibliography

logger = logging.getLogger(__name__)

# bibtexparser keeps these alongside the real fields
_ID = "ID"
_ENTRYTYPE = "ENTRYTYPE"


def _to_entry(raw: dict[str, str]) -> BibEntry:
    # bibtexparser 1.x stores fields last-to-first
    fields = [(name, value) for name, value in raw.items() if name not in (_ID, _ENTRYTYPE)]
    return BibEntry(
        key=raw[_ID],
        entry_type=raw.get(_ENTRYTYPE),
        fields=tuple(reversed(fields)),
    )


def load_bibtex(
    text: str,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> InMemoryBibliography:
    """Parse BibTeX source into an in-memory bibliography.

    Field values are kept as written (no LaTeX-to-unicode conversion).
    """
    if not text.strip():
        metrics_hook.record_gauge(names.BIBLIOGRAPHY_ENTRIES, 0)
        return InMemoryBibliography()

    parser = BibTexParser(common_strings=True, ignore_nonstandard_types=False)
    database = bibtexparser.loads(text, parser=parser)
    bibliography = InMemoryBibliography(_to_entry(raw) for raw in database.entries)

    metrics_hook.record_gauge(names.BIBLIOGRAPHY_ENTRIES, len(bibliography))
    logger.info("Loaded %d bibliography entries", len(bibliography))
    return bibliography


def load_bibtex_file(
    path: str | Path,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> InMemoryBibliography:
    logger.debug("Reading bibliography file: %s", path)
    text = Path(path).read_text(encoding="utf-8")
    return load_bibtex(text, metrics_hook=metrics_hook)
