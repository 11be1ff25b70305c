"""adoc2sections: flatten AsciiDoc section trees into faceted search records."""

from adoc2sections.exceptions import (
    Adoc2sectionsError,
    ConversionError,
    FlattenError,
    IndexingError,
    InvalidLevelError,
    MalformedSectionError,
    ParseError,
)
from adoc2sections.flatten import (
    assemble_facets,
    build_ancestor_chain,
    flatten_sections,
    validate_level,
)
from adoc2sections.html_parser import ParsedDocument, parse_asciidoc_html
from adoc2sections.ingestion import IngestionOptions, ingest_document
from adoc2sections.schemas import ContentBlock, FlattenedRecord, IngestionResult, SectionNode
from adoc2sections.text import render_blocks

__all__ = [
    "Adoc2sectionsError",
    "ContentBlock",
    "ConversionError",
    "FlattenError",
    "FlattenedRecord",
    "IndexingError",
    "IngestionOptions",
    "IngestionResult",
    "InvalidLevelError",
    "MalformedSectionError",
    "ParseError",
    "ParsedDocument",
    "SectionNode",
    "assemble_facets",
    "build_ancestor_chain",
    "flatten_sections",
    "ingest_document",
    "parse_asciidoc_html",
    "render_blocks",
    "validate_level",
]
