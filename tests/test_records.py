"""Tests for FlattenedRecord serialization."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from adoc2sections.schemas import HIERARCHY_LEVEL_FIELDS, FlattenedRecord


@pytest.fixture
def record() -> FlattenedRecord:
    return FlattenedRecord(
        section_id="_storage",
        anchor="_storage",
        name="Storage",
        level=3,
        content="Storage text",
        hierarchy_levels={0: "Storage", 1: "Design", 2: "Overview"},
        hierarchy_radio=None,
        missing_hierarchy_levels=(3,),
    )


class TestToSearchDocument:
    """Tests for FlattenedRecord.to_search_document."""

    def test_has_all_seven_hierarchy_slots(self, record: FlattenedRecord) -> None:
        document = record.to_search_document()
        assert HIERARCHY_LEVEL_FIELDS == tuple(f"hierarchy_level{i}" for i in range(7))
        for field_name in HIERARCHY_LEVEL_FIELDS:
            assert field_name in document

    def test_unset_slots_are_null(self, record: FlattenedRecord) -> None:
        document = record.to_search_document()
        assert document["hierarchy_level0"] == "Storage"
        assert document["hierarchy_level2"] == "Overview"
        assert document["hierarchy_level3"] is None
        assert document["hierarchy_level6"] is None
        assert document["hierarchy_radio"] is None

    def test_keeps_record_fields(self, record: FlattenedRecord) -> None:
        document = record.to_search_document()
        assert document["section_id"] == "_storage"
        assert document["anchor"] == "_storage"
        assert document["name"] == "Storage"
        assert document["level"] == 3
        assert document["content"] == "Storage text"

    def test_without_document_number(self, record: FlattenedRecord) -> None:
        document = record.to_search_document()
        assert document["id"] == "_storage"
        assert "document_number" not in document

    def test_with_document_number(self, record: FlattenedRecord) -> None:
        document = record.to_search_document(123)
        assert document["id"] == "123-_storage"
        assert document["document_number"] == 123


class TestToRow:
    """Tests for FlattenedRecord.to_row."""

    def test_matches_rfd_sections_columns(self, record: FlattenedRecord) -> None:
        assert record.to_row(42) == {
            "anchor": "_storage",
            "content": "Storage text",
            "name": "Storage",
            "rfds_id": 42,
        }


class TestValidation:
    """Tests for FlattenedRecord field validation."""

    @pytest.mark.parametrize("level", [-1, 7])
    def test_rejects_level_out_of_range(self, level: int) -> None:
        with pytest.raises(ValidationError):
            FlattenedRecord(section_id="a", anchor="a", name="A", level=level, content="")

    def test_is_sparse(self, record: FlattenedRecord) -> None:
        assert record.is_sparse
        full = record.model_copy(update={"missing_hierarchy_levels": ()})
        assert not full.is_sparse

    def test_hierarchy_levels_are_read_only(self, record: FlattenedRecord) -> None:
        with pytest.raises(TypeError):
            record.hierarchy_levels[0] = "Tampered"  # type: ignore[index]
        assert record.to_search_document()["hierarchy_level0"] == "Storage"

    def test_record_is_hashable(self, record: FlattenedRecord) -> None:
        twin = record.model_copy()
        assert hash(record) == hash(twin)
        assert len({record, twin}) == 1

    def test_slots_sorted_from_mapping(self, record: FlattenedRecord) -> None:
        assert record.hierarchy_slots == ((0, "Storage"), (1, "Design"), (2, "Overview"))

    def test_json_round_trip_keeps_slot_keys(self, record: FlattenedRecord) -> None:
        restored = FlattenedRecord.model_validate_json(record.model_dump_json())
        assert restored == record
