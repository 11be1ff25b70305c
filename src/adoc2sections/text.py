"""Render asciidoctor HTML blocks into plain readable text."""

from __future__ import annotations

import re
from typing import Sequence

from adoc2sections.schemas import ContentBlock

try:
    from bs4 import BeautifulSoup
    from bs4.element import Comment, NavigableString, Tag
except ImportError as exc:  # pragma: no cover - runtime dependency check
    raise RuntimeError(
        "BeautifulSoup4 is required for HTML parsing (pip install beautifulsoup4)."
    ) from exc


_ADMONITION_LABELS = {"note", "tip", "important", "caution", "warning"}
_VERBATIM_BLOCKS = {"listingblock", "literalblock"}
_LIST_BLOCKS = {"ulist", "olist", "colist"}


def render_blocks(blocks: Sequence[ContentBlock]) -> str:
    """Render a section's own blocks to plain text.

    Nested section markers are skipped, so only text owned directly by the
    section is returned.
    """
    html = "".join(block.html for block in blocks if not block.is_section)
    if not html.strip():
        return ""
    return render_html_text(html)


def render_html_text(html: str) -> str:
    """Convert an HTML fragment into plain text."""
    soup = BeautifulSoup(html, "lxml")
    _strip_unwanted_elements(soup)
    blocks = _serialize_children(soup)
    return "\n\n".join(block for block in blocks if block).strip()


def _strip_unwanted_elements(soup: BeautifulSoup) -> None:
    for tag in soup.find_all(["script", "style", "noscript", "link", "meta", "colgroup"]):
        tag.decompose()
    for comment in soup.find_all(string=lambda text: isinstance(text, Comment)):
        comment.extract()


def _serialize_children(container: Tag) -> list[str]:
    blocks: list[str] = []
    for child in container.children:
        if isinstance(child, NavigableString):
            text = _normalize_text(str(child))
            if text:
                blocks.append(text)
            continue
        if not isinstance(child, Tag):
            continue
        blocks.extend(_serialize_block(child))
    return blocks


def _serialize_block(tag: Tag) -> list[str]:
    classes = set(tag.get("class", []))

    if tag.name == "div":
        if "admonitionblock" in classes:
            admonition = _serialize_admonition(tag, classes)
            return [admonition] if admonition else []
        if classes & _VERBATIM_BLOCKS:
            return _serialize_verbatim_block(tag)
        if classes & _LIST_BLOCKS or "dlist" in classes:
            return _serialize_children(tag)
        if "title" in classes:
            title = _normalize_text(tag.get_text(" ", strip=True))
            return [title] if title else []
        return _serialize_children(tag)

    if tag.name in {"section", "article", "body", "html"}:
        return _serialize_children(tag)

    if tag.name in {"h1", "h2", "h3", "h4", "h5", "h6"}:
        heading = _normalize_text(tag.get_text(" ", strip=True))
        return [heading] if heading else []

    if tag.name in {"p", "span"}:
        paragraph = _cleanup_inline_text(_serialize_inline(tag))
        return [paragraph] if paragraph else []

    if tag.name in {"ul", "ol"}:
        lines = _serialize_list(tag)
        return ["\n".join(lines)] if lines else []

    if tag.name == "dl":
        lines = _serialize_definition_list(tag)
        return ["\n".join(lines)] if lines else []

    if tag.name == "pre":
        text = tag.get_text().rstrip()
        return [text] if text.strip() else []

    if tag.name == "table":
        table_text = _serialize_table(tag)
        return [table_text] if table_text else []

    if tag.name == "blockquote":
        content = _normalize_text(_serialize_inline(tag))
        return [content] if content else []

    if tag.name == "img":
        alt = _normalize_text(tag.get("alt") or "")
        return [alt] if alt else []

    if tag.name in {"br", "hr"}:
        return []

    return _serialize_children(tag)


def _serialize_admonition(tag: Tag, classes: set[str]) -> str:
    label = next((cls.upper() for cls in sorted(classes) if cls in _ADMONITION_LABELS), None)
    content_tag = tag.find("td", class_="content") or tag
    text = "\n\n".join(_serialize_children(content_tag)).strip()
    if not text:
        return ""
    return f"{label}: {text}" if label else text


def _serialize_verbatim_block(tag: Tag) -> list[str]:
    blocks: list[str] = []
    title = tag.find("div", class_="title", recursive=False)
    if title:
        title_text = _normalize_text(title.get_text(" ", strip=True))
        if title_text:
            blocks.append(title_text)
    pre = tag.find("pre")
    if pre:
        text = pre.get_text().rstrip()
        if text.strip():
            blocks.append(text)
    return blocks


def _serialize_inline(node: Tag | NavigableString) -> str:
    if isinstance(node, NavigableString):
        return str(node)

    if node.name == "br":
        return "\n"

    if node.name == "a":
        text = _serialize_children_inline(node).strip()
        href = node.get("href")
        # Cross references within the document keep only their text.
        if not href or href.startswith("#"):
            return text
        if not text or text == href:
            return href
        return f"{text} [{href}]"

    if node.name in {"ul", "ol"}:
        return "\n" + "\n".join(_serialize_list(node)) + "\n"

    return _serialize_children_inline(node)


def _serialize_children_inline(tag: Tag) -> str:
    return "".join(_serialize_inline(child) for child in tag.children)


def _cleanup_inline_text(text: str) -> str:
    text = re.sub(r"[ \t]+", " ", text)
    text = re.sub(r"\s*\n\s*", "\n", text)
    return text.strip()


def _serialize_list(list_tag: Tag, indent: int = 0) -> list[str]:
    lines: list[str] = []
    ordered = list_tag.name == "ol"
    for position, item in enumerate(list_tag.find_all("li", recursive=False), start=1):
        item_text_parts: list[str] = []
        nested_lists: list[Tag] = []
        for child in item.children:
            if isinstance(child, Tag) and child.name in {"ul", "ol"}:
                nested_lists.append(child)
            elif isinstance(child, Tag) and set(child.get("class", [])) & _LIST_BLOCKS:
                nested = child.find(["ul", "ol"])
                if nested:
                    nested_lists.append(nested)
            else:
                item_text_parts.append(_serialize_inline(child))
        item_text = _normalize_text("".join(item_text_parts))
        marker = f"{position}." if ordered else "*"
        prefix = "  " * indent + marker + " "
        lines.append(prefix + item_text if item_text else prefix.rstrip())
        for nested in nested_lists:
            lines.extend(_serialize_list(nested, indent + 1))
    return lines


def _serialize_definition_list(dl: Tag) -> list[str]:
    lines: list[str] = []
    for child in dl.find_all(["dt", "dd"], recursive=False):
        text = _normalize_text(_serialize_inline(child))
        if not text:
            continue
        lines.append(text if child.name == "dt" else "  " + text)
    return lines


def _serialize_table(table: Tag) -> str:
    lines: list[str] = []
    caption = table.find("caption")
    if caption:
        caption_text = _normalize_text(caption.get_text(" ", strip=True))
        if caption_text:
            lines.append(caption_text)

    for row in table.find_all("tr"):
        cells = row.find_all(["th", "td"], recursive=False)
        values = [_normalize_text(cell.get_text(" ", strip=True)) for cell in cells]
        if any(values):
            lines.append("\t".join(values))
    return "\n".join(lines)


def _normalize_text(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()
