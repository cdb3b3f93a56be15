# src/texmeta/rendering/record.py

import logging
from datetime import datetime
from time import monotonic
from typing import BinaryIO

from texmeta.bibliography.base import Bibliography
from texmeta.errors import TexmetaError
from texmeta.observability import names
from texmeta.observability.base import MetricsHook, NoOpMetricsHook
from texmeta.parsers.models import MetadataRecord

from .abstract import render_abstract
from .citations import CitationRenderer
from .config import RenderConfig
from .formats import Format

logger = logging.getLogger(__name__)

FENCE = b"---\n"


def escape(text: bytes) -> bytes:
    """Backslash-escape double quotes."""
    return text.replace(b'"', b'\\"')


def split_keywords(keywords: bytes) -> list[str]:
    """Split `A. B. C.` into trimmed, non-empty tags."""
    text = keywords.decode("utf-8", errors="replace")
    return [kw.strip() for kw in text.split(".") if kw.strip()]


class RecordRenderer:
    """Writes a MetadataRecord as YAML front matter plus a Markdown body.

    Output is built in memory first; nothing reaches the sink if a
    citation cannot be resolved.
    """

    def __init__(
        self,
        bibliography: Bibliography,
        config: RenderConfig | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self.config = config or RenderConfig()
        self.metrics_hook = metrics_hook
        self.citations = CitationRenderer(bibliography, self.config, metrics_hook)

    def write(self, record: MetadataRecord, sink: BinaryIO, date: datetime) -> None:
        sink.write(self.render(record, date))

    def render(self, record: MetadataRecord, date: datetime) -> bytes:
        if date.tzinfo is None or date.utcoffset() is None:
            raise ValueError("date must be timezone-aware")

        start = monotonic()
        try:
            out = self._front_matter(record, date) + self._body(record)
        except TexmetaError:
            self.metrics_hook.increment(names.RENDER_ERRORS_TOTAL)
            raise

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.RENDER_DURATION, elapsed_ms)
        logger.info("Rendered metadata record: %d bytes", len(out))
        return out

    def description(self, record: MetadataRecord) -> bytes | None:
        """Plain-text abstract, shortened for the front matter."""
        if record.abstract is None:
            return None

        text = render_abstract(record.abstract, self.citations, Format.PLAIN_TEXT)
        if len(text) > self.config.description_limit:
            text = text[: self.config.description_keep] + self.config.ellipsis.encode()
        return text

    def _front_matter(self, record: MetadataRecord, date: datetime) -> bytes:
        out = bytearray(FENCE)

        if record.title is not None:
            out += b'title: "' + escape(record.title) + b'"\n'

        description = self.description(record)
        if description is not None:
            out += b'description: "' + escape(description) + b'"\n'

        out += b"date: " + date.isoformat().encode() + b"\n"

        if record.authors is not None:
            out += b"authors:"
            for author in record.authors:
                out += b"\n- given: " + author.given
                out += b"\n  family: " + author.family
            out += b"\n"

        if record.keywords is not None:
            out += b"tags:"
            for tag in split_keywords(record.keywords):
                out += b"\n- " + tag.encode()
            out += b"\n"

        if record.first_page is not None and record.last_page is not None:
            out += b"pages: [" + record.first_page + b", " + record.last_page + b"]\n"

        if record.section is not None:
            out += b'section: "' + escape(record.section) + b'"\n'

        if record.number is not None:
            out += b"series: [n" + escape(record.number) + b"]\n"
            out += b"number: " + escape(record.number) + b"\n"

        if record.semester is not None:
            out += b"semester: " + escape(record.semester) + b"\n"

        if record.year is not None:
            out += b"year: " + escape(record.year.strip()) + b"\n"

        out += FENCE + b"\n"
        return bytes(out)

    def _body(self, record: MetadataRecord) -> bytes:
        out = bytearray()

        if record.abstract is not None:
            out += self.config.abstract_label.encode()
            out += render_abstract(record.abstract, self.citations, Format.MARKDOWN)
            out += b"\n\n"

        if record.keywords is not None:
            out += self.config.keywords_label.encode() + record.keywords + b"\n"

        return bytes(out)


def render_record(
    record: MetadataRecord,
    bibliography: Bibliography,
    date: datetime,
    config: RenderConfig | None = None,
) -> bytes:
    return RecordRenderer(bibliography, config).render(record, date)
