"""Flatten a section tree into per-section records with hierarchy facets."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Sequence

from adoc2sections.config import MAX_RADIO_LEVEL, MAX_SECTION_LEVEL, MIN_SECTION_LEVEL
from adoc2sections.exceptions import InvalidLevelError, MalformedSectionError
from adoc2sections.schemas import ContentBlock, FlattenedRecord, SectionNode
from adoc2sections.text import render_blocks

logger = logging.getLogger(__name__)

Renderer = Callable[[Sequence[ContentBlock]], str]


def flatten_sections(
    sections: Iterable[SectionNode],
    *,
    render: Renderer = render_blocks,
) -> list[FlattenedRecord]:
    """Flatten a section forest into records in pre-order.

    Every node produces exactly one record, placed before the records of its
    descendants. Siblings keep document order.

    Args:
        sections: Top-level section nodes of one document.
        render: Converts a node's own content blocks into plain text. Called
            once per node and never given nested-section blocks.

    Returns:
        One record per node. An empty forest yields an empty list.

    Raises:
        InvalidLevelError: If any node's level is outside the supported range.
        MalformedSectionError: If any node lacks an id or a name.
    """
    records: list[FlattenedRecord] = []

    def _walk(node: SectionNode) -> None:
        records.append(_flatten_node(node, render))
        for child in node.children:
            _walk(child)

    for section in sections:
        _walk(section)

    sparse = sum(1 for record in records if record.is_sparse)
    logger.debug(
        "Flattened section tree",
        extra={"record_count": len(records), "sparse_record_count": sparse},
    )
    return records


def validate_level(level: object) -> int:
    """Return ``level`` if it is a whole number within the facet range.

    Raises:
        InvalidLevelError: For non-integers, booleans, or out-of-range values.
    """
    if isinstance(level, bool) or not isinstance(level, int):
        raise InvalidLevelError(level)
    if not MIN_SECTION_LEVEL <= level <= MAX_SECTION_LEVEL:
        raise InvalidLevelError(level)
    return level


def build_ancestor_chain(node: SectionNode) -> list[str]:
    """Return the node's own name followed by its ancestors' names.

    At most ``level - 1`` ancestors are collected, nearest first. The walk
    also stops at the top of the forest, so the level is a cap rather than
    a guaranteed length.
    """
    chain = [node.name]
    remaining = node.level - 1
    current = node.parent
    while remaining > 0 and current is not None:
        chain.append(current.name)
        remaining -= 1
        current = current.parent
    return chain


def assemble_facets(
    chain: Sequence[str], level: int
) -> tuple[dict[int, str], str | None, tuple[int, ...]]:
    """Map an ancestor chain onto hierarchy slots for a validated level.

    Returns:
        ``(hierarchy_levels, hierarchy_radio, missing_slots)``. Slots in
        ``0..=level`` past the end of the chain are left out of
        ``hierarchy_levels`` and listed in ``missing_slots``. The radio
        value is slot ``min(level, MAX_RADIO_LEVEL)``; level 6 shares slot 5.
    """
    hierarchy_levels: dict[int, str] = {}
    missing: list[int] = []
    for index in range(level + 1):
        if index < len(chain):
            hierarchy_levels[index] = chain[index]
        else:
            missing.append(index)

    hierarchy_radio = hierarchy_levels.get(min(level, MAX_RADIO_LEVEL))
    return hierarchy_levels, hierarchy_radio, tuple(missing)


def _flatten_node(node: SectionNode, render: Renderer) -> FlattenedRecord:
    section_id = getattr(node, "id", None)
    try:
        level = validate_level(getattr(node, "level", None))
    except InvalidLevelError as exc:
        raise InvalidLevelError(exc.level, section_id=section_id) from exc

    if not isinstance(section_id, str) or not section_id:
        raise MalformedSectionError(f"Section at level {level} has no id")
    name = getattr(node, "name", None)
    if not isinstance(name, str):
        raise MalformedSectionError(f"Section {section_id!r} has no name")

    content = render(node.content_blocks)
    chain = build_ancestor_chain(node)
    hierarchy_levels, hierarchy_radio, missing = assemble_facets(chain, level)
    if missing:
        logger.debug(
            "Section has unset hierarchy slots",
            extra={"section_id": section_id, "level": level, "missing": list(missing)},
        )

    return FlattenedRecord(
        section_id=section_id,
        anchor=section_id,
        name=name,
        level=level,
        content=content,
        hierarchy_levels=hierarchy_levels,
        hierarchy_radio=hierarchy_radio,
        missing_hierarchy_levels=missing,
    )
