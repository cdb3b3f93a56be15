# src/texmeta/parsers/metadata_parser.py

import logging
from dataclasses import fields
from time import monotonic
from typing import BinaryIO

from texmeta.errors import GrammarError
from texmeta.observability import names
from texmeta.observability.base import MetricsHook, NoOpMetricsHook

from .base import DocumentParser
from .metadata import parse_document
from .models import MetadataRecord

logger = logging.getLogger(__name__)


class MetadataParser(DocumentParser):
    """
    Parser for `key=value\\par` article metadata.
    - Reads the stream fully, then parses the bytes
    - Reports duration, field counts and failures to the metrics hook
    """

    def __init__(self, metrics_hook: MetricsHook = NoOpMetricsHook()) -> None:
        self.metrics_hook = metrics_hook

    def parse(self, source: BinaryIO) -> MetadataRecord:
        return self.parse_bytes(source.read())

    def parse_bytes(self, data: bytes) -> MetadataRecord:
        start = monotonic()
        try:
            record = parse_document(data)
        except GrammarError as e:
            logger.error("Metadata parse failed: %s", e)
            self.metrics_hook.increment(names.PARSE_ERRORS_TOTAL)
            raise

        present = [f.name for f in fields(record) if getattr(record, f.name) is not None]
        for name in present:
            self.metrics_hook.increment(names.PARSE_FIELDS_TOTAL, labels={"field": name})

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.PARSE_DURATION, elapsed_ms)
        logger.info("Parsed metadata document: %d bytes, fields=%s", len(data), present)
        return record
