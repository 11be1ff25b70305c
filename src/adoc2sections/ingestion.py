"""Ingestion pipeline for AsciiDoc -> flattened section records."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Literal

from adoc2sections.asciidoctor import convert_asciidoc_to_html
from adoc2sections.flatten import flatten_sections
from adoc2sections.html_parser import parse_asciidoc_html
from adoc2sections.schemas import FlattenedRecord, IngestionResult

logger = logging.getLogger(__name__)


@dataclass
class IngestionOptions:
    """Options for document ingestion.

    Attributes:
        source_format: ``"asciidoc"`` to run asciidoctor first, ``"html"``
            when the content is already asciidoctor HTML.
        asciidoctor_bin: Override for the asciidoctor executable.
    """

    source_format: Literal["asciidoc", "html"] = "asciidoc"
    asciidoctor_bin: str | None = None


async def ingest_document(
    content: str,
    *,
    options: IngestionOptions | None = None,
) -> IngestionResult:
    """Convert, parse, and flatten one document into section records.

    Args:
        content: AsciiDoc source or asciidoctor HTML.
        options: Processing options. Uses defaults if None.

    Returns:
        IngestionResult with title, RFD number, and records in pre-order.

    Raises:
        ConversionError: If asciidoctor fails.
        ParseError: If the HTML section structure is broken.
        FlattenError: If any section has an invalid level or missing fields.
    """
    opts = options or IngestionOptions()

    if opts.source_format == "asciidoc":
        # asciidoctor is a blocking subprocess call
        html = await asyncio.to_thread(
            convert_asciidoc_to_html, content, binary=opts.asciidoctor_bin
        )
    else:
        html = content

    parsed = parse_asciidoc_html(html)
    records = flatten_sections(parsed.sections)

    logger.info(
        "Ingested document",
        extra={
            "title": parsed.title,
            "number": parsed.number,
            "source_format": opts.source_format,
            "record_count": len(records),
        },
    )

    return IngestionResult(
        title=parsed.title,
        number=parsed.number,
        summary=_build_summary(parsed.title, parsed.number, records),
        records=records,
    )


def _build_summary(
    title: str | None, number: int | None, records: list[FlattenedRecord]
) -> str:
    summary_lines = []
    if title:
        summary_lines.append(f"Title: {title}")
    if number is not None:
        summary_lines.append(f"RFD: {number}")
    summary_lines.append(f"Sections: {len(records)}")
    deepest = max((record.level for record in records), default=None)
    if deepest is not None:
        summary_lines.append(f"Deepest level: {deepest}")
    sparse = sum(1 for record in records if record.is_sparse)
    if sparse:
        summary_lines.append(f"Sections with unset hierarchy slots: {sparse}")
    return "\n".join(summary_lines)
