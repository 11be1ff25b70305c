"""Section tree models."""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field

SECTION_CONTEXT = "section"


@dataclass(frozen=True)
class ContentBlock:
    """A rendered block that belongs to a section.

    Nested sections appear in their parent's block list as ``section``
    markers so the original block order is kept.
    """

    context: str
    html: str

    @property
    def is_section(self) -> bool:
        return self.context == SECTION_CONTEXT


@dataclass(eq=False)
class SectionNode:
    """A hierarchical section node.

    Children are owned by their parent; the parent link is a weak reference
    so walking upward never keeps a detached subtree's ancestors alive.
    """

    id: str
    name: str
    level: int
    blocks: list[ContentBlock] = field(default_factory=list)
    children: list[SectionNode] = field(default_factory=list)
    _parent_ref: weakref.ref[SectionNode] | None = field(default=None, init=False, repr=False)

    @property
    def parent(self) -> SectionNode | None:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def content_blocks(self) -> list[ContentBlock]:
        """Blocks owned directly by this section, without nested sections."""
        return [block for block in self.blocks if not block.is_section]

    def add_child(self, child: SectionNode) -> None:
        """Attach ``child`` and record it as a section marker in the block list."""
        child._parent_ref = weakref.ref(self)
        self.children.append(child)
        self.blocks.append(ContentBlock(context=SECTION_CONTEXT, html=""))

    def add_block(self, block: ContentBlock) -> None:
        self.blocks.append(block)
