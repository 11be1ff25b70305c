"""Command line entry point: print a document's section records as JSON."""

from __future__ import annotations

import argparse
import asyncio
import json
import os
import sys
from pathlib import Path

from adoc2sections.exceptions import Adoc2sectionsError
from adoc2sections.ingestion import IngestionOptions, ingest_document
from adoc2sections.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="adoc2sections",
        description="Flatten an AsciiDoc document into per-section search records.",
    )
    parser.add_argument("file", help="AsciiDoc file, or '-' for stdin")
    parser.add_argument("--html", action="store_true", help="Input is already asciidoctor HTML")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation (default: 2)")
    parser.add_argument("--log-level", default=None, help="Logging level (default: LOG_LEVEL or WARNING)")
    args = parser.parse_args(argv)

    configure_logging(args.log_level or os.getenv("LOG_LEVEL") or "WARNING")

    try:
        content = sys.stdin.read() if args.file == "-" else Path(args.file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read {args.file}: {exc}", file=sys.stderr)
        return 1
    options = IngestionOptions(source_format="html" if args.html else "asciidoc")

    try:
        result = asyncio.run(ingest_document(content, options=options))
    except Adoc2sectionsError as exc:
        logger.debug("Ingestion failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    payload = {
        "title": result.title,
        "number": result.number,
        "records": [record.to_search_document(result.number) for record in result.records],
    }
    print(json.dumps(payload, indent=args.indent or None, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
