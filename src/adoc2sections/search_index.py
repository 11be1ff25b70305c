"""Push flattened section records to a Meilisearch-compatible index."""

from __future__ import annotations

import logging
from typing import Any, Iterable

import httpx

from adoc2sections.config import ADOC2SECTIONS_SEARCH_INDEX, ADOC2SECTIONS_SEARCH_URL
from adoc2sections.http_utils import create_client, send_with_retries
from adoc2sections.schemas import HIERARCHY_LEVEL_FIELDS, FlattenedRecord

logger = logging.getLogger(__name__)

PRIMARY_KEY = "id"
FILTERABLE_ATTRIBUTES = ["document_number", *HIERARCHY_LEVEL_FIELDS, "hierarchy_radio"]
SEARCHABLE_ATTRIBUTES = ["name", "content", *HIERARCHY_LEVEL_FIELDS]


def _index_url(index: str | None, path: str = "") -> str:
    return f"{ADOC2SECTIONS_SEARCH_URL}/indexes/{index or ADOC2SECTIONS_SEARCH_INDEX}{path}"


async def replace_document_sections(
    records: Iterable[FlattenedRecord],
    *,
    document_number: int,
    index: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> int:
    """Replace all indexed sections of one document with ``records``.

    Index settings are applied first so ``document_number`` is filterable,
    then existing entries for that document are deleted so sections removed
    from the document do not linger in search results. The index processes
    these tasks in submission order.

    Returns:
        Number of section documents submitted.

    Raises:
        IndexingError: If either request fails.
    """
    documents = [record.to_search_document(document_number) for record in records]

    async def _replace(http_client: httpx.AsyncClient) -> None:
        await ensure_index_settings(index=index, client=http_client)
        await send_with_retries(
            "POST",
            _index_url(index, "/documents/delete"),
            client=http_client,
            json={"filter": f"document_number = {document_number}"},
        )
        if documents:
            await send_with_retries(
                "POST",
                _index_url(index, f"/documents?primaryKey={PRIMARY_KEY}"),
                client=http_client,
                json=documents,
            )

    if client is not None:
        await _replace(client)
    else:
        async with create_client() as new_client:
            await _replace(new_client)

    logger.info(
        "Indexed document sections",
        extra={"document_number": document_number, "section_count": len(documents)},
    )
    return len(documents)


async def ensure_index_settings(
    *,
    index: str | None = None,
    client: httpx.AsyncClient | None = None,
) -> dict[str, Any]:
    """Configure filterable and searchable attributes for section facets."""
    settings = {
        "filterableAttributes": FILTERABLE_ATTRIBUTES,
        "searchableAttributes": SEARCHABLE_ATTRIBUTES,
    }
    response = await send_with_retries(
        "PATCH",
        _index_url(index, "/settings"),
        client=client,
        json=settings,
    )
    return response.json()
