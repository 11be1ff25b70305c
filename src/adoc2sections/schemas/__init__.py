"""Shared schemas for adoc2sections."""

from adoc2sections.schemas.ingestion import IngestionResult
from adoc2sections.schemas.records import HIERARCHY_LEVEL_FIELDS, FlattenedRecord
from adoc2sections.schemas.sections import ContentBlock, SectionNode

__all__ = [
    "HIERARCHY_LEVEL_FIELDS",
    "ContentBlock",
    "FlattenedRecord",
    "IngestionResult",
    "SectionNode",
]
