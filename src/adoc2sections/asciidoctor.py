"""Convert AsciiDoc source to HTML with the asciidoctor CLI."""

from __future__ import annotations

import logging
import subprocess

from adoc2sections.config import ADOC2SECTIONS_ASCIIDOCTOR_BIN
from adoc2sections.exceptions import ConversionError

logger = logging.getLogger(__name__)


def convert_asciidoc_to_html(content: str, *, binary: str | None = None) -> str:
    """Convert AsciiDoc text to embeddable HTML using asciidoctor (sync version).

    The document is passed on stdin and the body HTML is read from stdout.
    ``showtitle`` is set so the document title is kept in the output.

    Args:
        content: Raw AsciiDoc document.
        binary: asciidoctor executable; defaults to the configured one.

    Returns:
        HTML string produced by asciidoctor.

    Raises:
        ConversionError: If asciidoctor is not available or conversion fails.
    """
    command = [
        binary or ADOC2SECTIONS_ASCIIDOCTOR_BIN,
        "--embedded",
        "--attribute",
        "showtitle",
        "--out-file",
        "-",
        "-",
    ]

    try:
        result = subprocess.run(
            command,
            input=content,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError as exc:
        raise ConversionError(f"asciidoctor executable not found: {command[0]}") from exc

    if result.returncode != 0:
        raise ConversionError(f"asciidoctor conversion failed: {result.stderr}")

    if result.stderr:
        logger.warning("asciidoctor reported problems", extra={"stderr": result.stderr.strip()})

    return result.stdout
