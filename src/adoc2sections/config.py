"""Local configuration for adoc2sections."""

from __future__ import annotations

import os


# Fixed facet bounds; not overridable from the environment.
MIN_SECTION_LEVEL = 0
MAX_SECTION_LEVEL = 6
MAX_RADIO_LEVEL = 5

DEFAULT_ASCIIDOCTOR_BIN = "asciidoctor"
DEFAULT_SEARCH_URL = "http://localhost:7700"
DEFAULT_SEARCH_INDEX = "rfd"
DEFAULT_HTTP_TIMEOUT_S = 10.0
DEFAULT_HTTP_MAX_RETRIES = 2
DEFAULT_HTTP_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "adoc2sections/0.1"

ADOC2SECTIONS_ASCIIDOCTOR_BIN = os.getenv("ADOC2SECTIONS_ASCIIDOCTOR_BIN", DEFAULT_ASCIIDOCTOR_BIN)
ADOC2SECTIONS_SEARCH_URL = os.getenv("ADOC2SECTIONS_SEARCH_URL", DEFAULT_SEARCH_URL).rstrip("/")
ADOC2SECTIONS_SEARCH_API_KEY = os.getenv("ADOC2SECTIONS_SEARCH_API_KEY") or None
ADOC2SECTIONS_SEARCH_INDEX = os.getenv("ADOC2SECTIONS_SEARCH_INDEX", DEFAULT_SEARCH_INDEX)
ADOC2SECTIONS_HTTP_TIMEOUT_S = float(os.getenv("ADOC2SECTIONS_HTTP_TIMEOUT_S", str(DEFAULT_HTTP_TIMEOUT_S)))
ADOC2SECTIONS_HTTP_MAX_RETRIES = int(os.getenv("ADOC2SECTIONS_HTTP_MAX_RETRIES", str(DEFAULT_HTTP_MAX_RETRIES)))
ADOC2SECTIONS_HTTP_BACKOFF_S = float(os.getenv("ADOC2SECTIONS_HTTP_BACKOFF_S", str(DEFAULT_HTTP_BACKOFF_S)))
ADOC2SECTIONS_USER_AGENT = os.getenv("ADOC2SECTIONS_USER_AGENT", DEFAULT_USER_AGENT)
