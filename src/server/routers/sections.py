"""Sections endpoint for the API."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from adoc2sections.exceptions import ConversionError, FlattenError, IndexingError, ParseError
from adoc2sections.ingestion import IngestionOptions, ingest_document
from adoc2sections.search_index import replace_document_sections
from adoc2sections.utils.logging_config import get_logger
from server.models import SectionsErrorResponse, SectionsRequest, SectionsSuccessResponse

logger = get_logger(__name__)

# Named differently across Starlette releases.
HTTP_422_UNPROCESSABLE = 422

router = APIRouter()

SECTIONS_RESPONSES = {
    status.HTTP_200_OK: {"model": SectionsSuccessResponse, "description": "Document flattened"},
    HTTP_422_UNPROCESSABLE: {"model": SectionsErrorResponse, "description": "Invalid document"},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": SectionsErrorResponse, "description": "Conversion failed"},
    status.HTTP_502_BAD_GATEWAY: {"model": SectionsErrorResponse, "description": "Search index unavailable"},
}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=SectionsErrorResponse(error=message).model_dump())


@router.post("/api/sections", responses=SECTIONS_RESPONSES)
async def api_sections(sections_request: SectionsRequest) -> JSONResponse:
    """Flatten a document into per-section records.

    **Parameters**

    - **sections_request** (`SectionsRequest`): document content and options

    **Returns**

    - **JSONResponse**: the records in search-document form, or an error

    """
    options = IngestionOptions(source_format=sections_request.source_format.value)

    try:
        result = await ingest_document(sections_request.content, options=options)
    except (FlattenError, ParseError) as exc:
        logger.warning("Document rejected", extra={"error": str(exc)})
        return _error(HTTP_422_UNPROCESSABLE, str(exc))
    except ConversionError as exc:
        logger.error("Document conversion failed", extra={"error": str(exc)})
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))

    number = sections_request.document_number if sections_request.document_number is not None else result.number

    indexed = None
    if sections_request.index:
        if number is None:
            return _error(HTTP_422_UNPROCESSABLE, "document_number is required for indexing")
        try:
            indexed = await replace_document_sections(result.records, document_number=number)
        except IndexingError as exc:
            logger.error("Indexing failed", extra={"document_number": number, "error": str(exc)})
            return _error(status.HTTP_502_BAD_GATEWAY, str(exc))

    response = SectionsSuccessResponse(
        title=result.title,
        number=number,
        summary=result.summary,
        records=[record.to_search_document(number) for record in result.records],
        indexed=indexed,
    )
    return JSONResponse(content=response.model_dump())
