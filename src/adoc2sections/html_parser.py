"""Parse asciidoctor HTML into document metadata and a section tree."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable

from adoc2sections.exceptions import ParseError
from adoc2sections.schemas import ContentBlock, SectionNode
from adoc2sections.text import render_html_text

try:
    from bs4 import BeautifulSoup
    from bs4.element import Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise ParseError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


_HEADING_RE = re.compile(r"^h[1-6]$")
_SECTION_CLASS_RE = re.compile(r"^sect(\d+)$")
_RFD_TITLE_RE = re.compile(r"^RFD\s+(\d+)\s*[:\-]?\s*(.*)$", re.IGNORECASE)


@dataclass
class ParsedDocument:
    """Parsed content extracted from asciidoctor HTML."""

    title: str | None
    number: int | None
    preamble: str | None
    sections: list[SectionNode] = field(default_factory=list)


def parse_asciidoc_html(html: str) -> ParsedDocument:
    """Extract title, RFD number, preamble, and section tree from HTML.

    Accepts both embedded (``asciidoctor -e``) and standalone output.

    Raises:
        ParseError: If a section wrapper has no heading.
    """
    soup = BeautifulSoup(html, "lxml")
    document_root = _find_document_root(soup)

    title, number = _split_rfd_title(_extract_title(soup, document_root))
    preamble = _extract_preamble(document_root)
    sections = _extract_sections(document_root)

    return ParsedDocument(title=title, number=number, preamble=preamble, sections=sections)


def _find_document_root(soup: BeautifulSoup) -> Tag:
    content = soup.find("div", id="content")
    if content:
        return content
    if soup.body:
        return soup.body
    return soup


def _extract_title(soup: BeautifulSoup, root: Tag) -> str | None:
    header = soup.find("div", id="header")
    title_tag = header.find("h1") if header else None
    if title_tag is None:
        title_tag = next(
            (tag for tag in _iter_child_tags(root) if tag.name == "h1" and "sect0" not in tag.get("class", [])),
            None,
        )
    if title_tag is None:
        return None
    return title_tag.get_text(" ", strip=True) or None


def _split_rfd_title(title: str | None) -> tuple[str | None, int | None]:
    """Split ``RFD 123 Some Title`` into ``("Some Title", 123)``."""
    if not title:
        return None, None
    match = _RFD_TITLE_RE.match(title.strip())
    if not match:
        return title.strip(), None
    return match.group(2).strip() or None, int(match.group(1))


def _extract_preamble(root: Tag) -> str | None:
    preamble = root.find("div", id="preamble", recursive=False)
    if not preamble:
        return None
    return render_html_text(str(preamble)) or None


class _SectionNumbering:
    """Expected ``sectnums`` prefixes for one run of sibling sections.

    A heading loses its prefix only when the prefix is the next number in
    sequence under its parent.
    """

    def __init__(self, prefix: str | None = "") -> None:
        self.prefix = prefix
        self.count = 0

    def take(self, text: str) -> tuple[str, _SectionNumbering]:
        if self.prefix is not None:
            expected = f"{self.prefix}{self.count + 1}."
            if text.startswith(expected + " "):
                self.count += 1
                return text[len(expected) :].strip(), _SectionNumbering(expected)
        return text, _SectionNumbering(None)


def _extract_sections(root: Tag) -> list[SectionNode]:
    sections: list[SectionNode] = []
    current_part: SectionNode | None = None
    # Chapter numbers run on across book parts.
    numbering = _SectionNumbering()

    for child in _iter_child_tags(root):
        classes = child.get("class", [])
        # Book parts are bare level-0 headings followed by their sections.
        if child.name == "h1" and "sect0" in classes:
            current_part = SectionNode(id=child.get("id") or "", name=_heading_text(child), level=0)
            sections.append(current_part)
            continue

        if _section_level(child) is not None:
            node = _build_section(child, numbering)
            if current_part is not None:
                current_part.add_child(node)
            else:
                sections.append(node)
            continue

        if current_part is not None:
            current_part.add_block(ContentBlock(context=_block_context(child), html=str(child)))

    return sections


def _build_section(wrapper: Tag, numbering: _SectionNumbering) -> SectionNode:
    level = _section_level(wrapper)
    heading = wrapper.find(_HEADING_RE, recursive=False)
    if heading is None or level is None:
        raise ParseError(f"Section wrapper without heading: {wrapper.get('class')}")

    name, child_numbering = numbering.take(_heading_text(heading))
    node = SectionNode(id=heading.get("id") or wrapper.get("id") or "", name=name, level=level)

    container = wrapper.find("div", class_="sectionbody", recursive=False) or wrapper
    for child in _iter_child_tags(container):
        if child is heading:
            continue
        if _section_level(child) is not None:
            node.add_child(_build_section(child, child_numbering))
        else:
            node.add_block(ContentBlock(context=_block_context(child), html=str(child)))
    return node


def _iter_child_tags(container: Tag) -> Iterable[Tag]:
    for child in container.children:
        if isinstance(child, Tag):
            yield child


def _section_level(tag: Tag) -> int | None:
    if tag.name != "div":
        return None
    for cls in tag.get("class", []):
        match = _SECTION_CLASS_RE.match(cls)
        if match:
            return int(match.group(1))
    return None


def _heading_text(heading: Tag) -> str:
    return re.sub(r"\s+", " ", heading.get_text(" ", strip=True))


def _block_context(tag: Tag) -> str:
    if tag.name == "table":
        return "table"
    classes = tag.get("class", [])
    if not classes:
        return tag.name
    name = classes[0]
    if name.endswith("block") and len(name) > len("block"):
        return name[: -len("block")]
    return name
