"""Ingestion output model."""

from __future__ import annotations

from pydantic import BaseModel, Field

from adoc2sections.schemas.records import FlattenedRecord


class IngestionResult(BaseModel):
    """Final ingestion output."""

    title: str | None = None
    number: int | None = None
    summary: str
    records: list[FlattenedRecord] = Field(default_factory=list)
