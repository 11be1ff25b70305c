"""Pydantic models for the sections API."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator


class SourceFormat(str, Enum):
    """Enumeration for accepted document formats."""

    ASCIIDOC = "asciidoc"
    HTML = "html"


class SectionsRequest(BaseModel):
    """Request model for the /api/sections endpoint.

    Attributes
    ----------
    content : str
        The AsciiDoc source, or asciidoctor HTML when ``source_format`` is html.
    source_format : SourceFormat
        Format of ``content``.
    document_number : int | None
        RFD number; overrides the number read from the document title.
    index : bool
        Replace the document's entries in the search index after flattening.

    """

    content: str = Field(..., description="Document content")
    source_format: SourceFormat = Field(default=SourceFormat.ASCIIDOC, description="Format of the content")
    document_number: int | None = Field(default=None, ge=0, description="RFD number")
    index: bool = Field(default=False, description="Push records to the search index")

    @field_validator("content")
    @classmethod
    def validate_content(cls, v: str) -> str:
        """Validate that ``content`` is not empty."""
        if not v.strip():
            err = "content cannot be empty"
            raise ValueError(err)
        return v


class SectionsSuccessResponse(BaseModel):
    """Success response model for the /api/sections endpoint."""

    title: str | None = Field(default=None, description="Document title")
    number: int | None = Field(default=None, description="RFD number")
    summary: str = Field(..., description="Ingestion summary")
    records: list[dict[str, Any]] = Field(default_factory=list, description="Flattened section records")
    indexed: int | None = Field(default=None, description="Records pushed to the search index")


class SectionsErrorResponse(BaseModel):
    """Error response model for the /api/sections endpoint."""

    error: str = Field(..., description="Error message")
