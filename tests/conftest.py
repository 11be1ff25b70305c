"""Test setup for adoc2sections."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from adoc2sections.schemas import ContentBlock, SectionNode  # noqa: E402


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running integration tests selectively:
        pytest -m integration       # run only integration tests
        pytest -m "not integration" # skip integration tests
    """
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (require the asciidoctor binary)",
    )


SAMPLE_ASCIIDOC = """:showtitle:
:toc: left
:numbered:
:icons: font
:state: published
:discussion: https://github.com/organization/repo/pull/123
:revremark: State: {state} | {discussion}
:authors: Firstname Lastname <author@organization.com>

= RFD 123 On Parsing Documents
{authors}

An introductory line about the document

== Background

A paragraph about background topics

== Possibilities

Nested sections describing possible options

=== The Fist Option

First in the list

=== The Second Option

Second in the list

==== Further Nested Details

This options contains further information

=== The Third Option

Third in the list
"""

# Embedded asciidoctor output for SAMPLE_ASCIIDOC.
SAMPLE_HTML = """<h1>RFD 123 On Parsing Documents</h1>
<div id="preamble">
<div class="sectionbody">
<div class="paragraph">
<p>An introductory line about the document</p>
</div>
</div>
</div>
<div class="sect1">
<h2 id="_background">1. Background</h2>
<div class="sectionbody">
<div class="paragraph">
<p>A paragraph about background topics</p>
</div>
</div>
</div>
<div class="sect1">
<h2 id="_possibilities">2. Possibilities</h2>
<div class="sectionbody">
<div class="paragraph">
<p>Nested sections describing possible options</p>
</div>
<div class="sect2">
<h3 id="_the_fist_option">2.1. The Fist Option</h3>
<div class="paragraph">
<p>First in the list</p>
</div>
</div>
<div class="sect2">
<h3 id="_the_second_option">2.2. The Second Option</h3>
<div class="paragraph">
<p>Second in the list</p>
</div>
<div class="sect3">
<h4 id="_further_nested_details">2.2.1. Further Nested Details</h4>
<div class="paragraph">
<p>This options contains further information</p>
</div>
</div>
</div>
<div class="sect2">
<h3 id="_the_third_option">2.3. The Third Option</h3>
<div class="paragraph">
<p>Third in the list</p>
</div>
</div>
</div>
</div>
"""


def paragraph(text: str) -> ContentBlock:
    return ContentBlock(context="paragraph", html=f'<div class="paragraph"><p>{text}</p></div>')


def make_section(
    section_id: str,
    name: str,
    level: int,
    *children: SectionNode,
    text: str | None = None,
) -> SectionNode:
    """Build a section node with an optional paragraph and attached children."""
    node = SectionNode(id=section_id, name=name, level=level)
    if text is not None:
        node.add_block(paragraph(text))
    for child in children:
        node.add_child(child)
    return node


def make_chain(depth: int) -> list[SectionNode]:
    """Build a single path of sections with levels ``0..depth``.

    Returns the nodes root first; the root keeps the whole path alive.
    """
    nodes = [make_section("s0", "Level 0", 0)]
    for level in range(1, depth + 1):
        node = make_section(f"s{level}", f"Level {level}", level)
        nodes[-1].add_child(node)
        nodes.append(node)
    return nodes


@pytest.fixture
def sample_asciidoc() -> str:
    return SAMPLE_ASCIIDOC


@pytest.fixture
def sample_html() -> str:
    return SAMPLE_HTML
