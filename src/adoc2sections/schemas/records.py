"""Flattened section record model."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, model_validator

from adoc2sections.config import MAX_SECTION_LEVEL, MIN_SECTION_LEVEL

HIERARCHY_LEVEL_FIELDS = tuple(
    f"hierarchy_level{index}" for index in range(MIN_SECTION_LEVEL, MAX_SECTION_LEVEL + 1)
)


class FlattenedRecord(BaseModel):
    """One section of a document, ready for storage or search indexing.

    Attributes:
        section_id: Anchor id of the originating section.
        anchor: Same value as ``section_id``; kept for storage consumers.
        name: Section title.
        level: Validated section depth.
        content: Plain text of the section's own blocks.
        hierarchy_slots: ``(slot, name)`` pairs in slot order for slots
            ``0..=level`` the ancestor walk reached. Also accepted on input
            as a ``hierarchy_levels`` mapping.
        hierarchy_radio: Single-select facet value, slot ``min(level, 5)``.
        missing_hierarchy_levels: Slot indices in ``0..=level`` left unset.
    """

    model_config = ConfigDict(frozen=True)

    section_id: str
    anchor: str
    name: str
    level: int = Field(..., ge=MIN_SECTION_LEVEL, le=MAX_SECTION_LEVEL)
    content: str
    hierarchy_slots: tuple[tuple[int, str], ...] = ()
    hierarchy_radio: str | None = None
    missing_hierarchy_levels: tuple[int, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def _freeze_hierarchy_levels(cls, data: Any) -> Any:
        if isinstance(data, dict) and "hierarchy_levels" in data:
            data = dict(data)
            levels = data.pop("hierarchy_levels") or {}
            data["hierarchy_slots"] = tuple(sorted(levels.items()))
        return data

    @property
    def hierarchy_levels(self) -> Mapping[int, str]:
        """Read-only view of the facet names keyed by slot index."""
        return MappingProxyType(dict(self.hierarchy_slots))

    @property
    def is_sparse(self) -> bool:
        return bool(self.missing_hierarchy_levels)

    def to_search_document(self, document_number: int | None = None) -> dict[str, Any]:
        """Serialize to the flat document shape used by the search index."""
        document: dict[str, Any] = {
            "id": self.section_id if document_number is None else f"{document_number}-{self.section_id}",
            "section_id": self.section_id,
            "anchor": self.anchor,
            "name": self.name,
            "level": self.level,
            "content": self.content,
        }
        for index, field_name in enumerate(HIERARCHY_LEVEL_FIELDS):
            document[field_name] = self.hierarchy_levels.get(index)
        document["hierarchy_radio"] = self.hierarchy_radio
        if document_number is not None:
            document["document_number"] = document_number
        return document

    def to_row(self, document_id: int) -> dict[str, Any]:
        """Serialize to an ``rfd_sections`` row."""
        return {
            "anchor": self.anchor,
            "content": self.content,
            "name": self.name,
            "rfds_id": document_id,
        }
