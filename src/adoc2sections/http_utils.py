"""HTTP utilities for talking to the search index with retry logic."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Final

import httpx

from adoc2sections.config import (
    ADOC2SECTIONS_HTTP_BACKOFF_S,
    ADOC2SECTIONS_HTTP_MAX_RETRIES,
    ADOC2SECTIONS_HTTP_TIMEOUT_S,
    ADOC2SECTIONS_SEARCH_API_KEY,
    ADOC2SECTIONS_USER_AGENT,
)
from adoc2sections.exceptions import IndexingError

logger = logging.getLogger(__name__)

RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})


def default_headers(api_key: str | None = None) -> dict[str, str]:
    """Headers sent with every index request."""
    headers = {"User-Agent": ADOC2SECTIONS_USER_AGENT}
    key = api_key or ADOC2SECTIONS_SEARCH_API_KEY
    if key:
        headers["Authorization"] = f"Bearer {key}"
    return headers


def create_client(api_key: str | None = None) -> httpx.AsyncClient:
    """Create an AsyncClient configured for the search index."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(ADOC2SECTIONS_HTTP_TIMEOUT_S),
        headers=default_headers(api_key),
    )


async def send_with_retries(
    method: str,
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    json: Any = None,
) -> httpx.Response:
    """Send a request, retrying transient failures.

    Args:
        method: HTTP method.
        url: Absolute URL.
        client: Optional httpx.AsyncClient for connection pooling. If not
            provided, a new client is created for this request.
        json: JSON body.

    Returns:
        The successful response.

    Raises:
        IndexingError: If the request fails after all retries or the server
            answers with a non-retryable error status.
    """
    last_exc: Exception | None = None

    async def do_send(http_client: httpx.AsyncClient) -> httpx.Response:
        nonlocal last_exc

        for attempt in range(ADOC2SECTIONS_HTTP_MAX_RETRIES + 1):
            try:
                response = await http_client.request(method, url, json=json)

                if response.status_code in RETRY_STATUS_CODES:
                    last_exc = IndexingError(f"HTTP {response.status_code} from {url}")
                elif response.status_code >= 400:
                    raise IndexingError(
                        f"{method} {url} failed with HTTP {response.status_code}: {response.text}"
                    )
                else:
                    return response
            except httpx.RequestError as exc:
                last_exc = exc

            if attempt < ADOC2SECTIONS_HTTP_MAX_RETRIES:
                backoff = ADOC2SECTIONS_HTTP_BACKOFF_S * (2**attempt)
                logger.debug(
                    "Retrying index request",
                    extra={"url": url, "attempt": attempt + 1, "backoff_s": backoff},
                )
                await asyncio.sleep(backoff)

        raise IndexingError(f"Failed to {method} {url}: {last_exc}")

    if client is not None:
        return await do_send(client)

    async with create_client() as new_client:
        return await do_send(new_client)
