# src/texmeta/cli.py

"""Command-line entry point: metadata file (+ optional .bib) -> Markdown on stdout."""

import argparse
import logging
import sys
from datetime import UTC, datetime

from pydantic import ValidationError

from texmeta.bibliography import InMemoryBibliography, load_bibtex_file
from texmeta.errors import TexmetaError
from texmeta.observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook
from texmeta.parsers import MetadataParser
from texmeta.rendering import RecordRenderer, RenderConfig, load_render_config

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="texmeta",
        description="Convert article metadata to YAML front matter and a Markdown body",
    )
    parser.add_argument("metadata", help="Path to the key=value\\par metadata file")
    parser.add_argument(
        "bibliography",
        nargs="?",
        default=None,
        help="Path to a BibTeX file used to resolve \\cite and \\citeyear (default: empty)",
    )
    parser.add_argument(
        "--config", default=None, help="YAML file overriding rendering options"
    )
    parser.add_argument(
        "--date",
        type=datetime.fromisoformat,
        default=None,
        help="ISO-8601 timestamp with offset for the `date` field (default: now, UTC)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser.parse_args(argv)


def run(args: argparse.Namespace, metrics_hook: MetricsHook = NoOpMetricsHook()) -> bytes:
    config = load_render_config(args.config) if args.config else RenderConfig()

    with open(args.metadata, "rb") as f:
        record = MetadataParser(metrics_hook=metrics_hook).parse(f)

    if args.bibliography:
        bibliography = load_bibtex_file(args.bibliography, metrics_hook=metrics_hook)
    else:
        bibliography = InMemoryBibliography()

    date = args.date or datetime.now(UTC)
    renderer = RecordRenderer(bibliography, config, metrics_hook=metrics_hook)
    return renderer.render(record, date)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    metrics_hook = LoggingMetricsHook() if args.verbose else NoOpMetricsHook()

    try:
        output = run(args, metrics_hook)
    except (TexmetaError, ValidationError, ValueError, OSError) as e:
        logger.error("Document not convertible: %s", e)
        return 1

    sys.stdout.buffer.write(output)
    sys.stdout.buffer.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
