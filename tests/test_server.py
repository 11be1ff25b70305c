"""Tests for the sections API."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from adoc2sections.exceptions import ConversionError, IndexingError
from server.main import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


class TestSectionsEndpoint:
    """Tests for POST /api/sections."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_flattens_html(self, client: TestClient, sample_html: str) -> None:
        response = client.post("/api/sections", json={"content": sample_html, "source_format": "html"})

        assert response.status_code == 200
        body = response.json()
        assert body["title"] == "On Parsing Documents"
        assert body["number"] == 123
        assert body["indexed"] is None
        assert [record["section_id"] for record in body["records"]][:2] == ["_background", "_possibilities"]
        first = body["records"][0]
        assert first["id"] == "123-_background"
        assert first["hierarchy_level0"] == "Background"
        assert first["hierarchy_level1"] is None
        assert first["hierarchy_radio"] is None

    def test_asciidoc_uses_converter(self, client: TestClient, sample_asciidoc: str, sample_html: str) -> None:
        with patch("adoc2sections.ingestion.convert_asciidoc_to_html", return_value=sample_html):
            response = client.post("/api/sections", json={"content": sample_asciidoc})

        assert response.status_code == 200
        assert len(response.json()["records"]) == 6

    def test_document_number_override(self, client: TestClient, sample_html: str) -> None:
        response = client.post(
            "/api/sections",
            json={"content": sample_html, "source_format": "html", "document_number": 77},
        )
        assert response.json()["records"][0]["document_number"] == 77

    def test_empty_content_rejected(self, client: TestClient) -> None:
        response = client.post("/api/sections", json={"content": "   "})
        assert response.status_code == 422

    def test_invalid_level_is_422(self, client: TestClient) -> None:
        html = '<div class="sect8"><h6 id="_deep">Deep</h6></div>'
        response = client.post("/api/sections", json={"content": html, "source_format": "html"})

        assert response.status_code == 422
        assert "Invalid section level 8" in response.json()["error"]

    def test_conversion_error_is_500(self, client: TestClient) -> None:
        with patch(
            "adoc2sections.ingestion.convert_asciidoc_to_html",
            side_effect=ConversionError("asciidoctor executable not found: asciidoctor"),
        ):
            response = client.post("/api/sections", json={"content": "= Doc"})

        assert response.status_code == 500
        assert "not found" in response.json()["error"]

    def test_index_pushes_records(self, client: TestClient, sample_html: str) -> None:
        with patch(
            "server.routers.sections.replace_document_sections", new=AsyncMock(return_value=6)
        ) as mock_replace:
            response = client.post(
                "/api/sections",
                json={"content": sample_html, "source_format": "html", "index": True},
            )

        assert response.status_code == 200
        assert response.json()["indexed"] == 6
        assert mock_replace.await_args.kwargs["document_number"] == 123

    def test_index_requires_number(self, client: TestClient) -> None:
        html = '<div class="sect1"><h2 id="_a">A</h2><div class="sectionbody"></div></div>'
        response = client.post("/api/sections", json={"content": html, "source_format": "html", "index": True})

        assert response.status_code == 422
        assert "document_number" in response.json()["error"]

    def test_index_failure_is_502(self, client: TestClient, sample_html: str) -> None:
        with patch(
            "server.routers.sections.replace_document_sections",
            new=AsyncMock(side_effect=IndexingError("HTTP 503 from search")),
        ):
            response = client.post(
                "/api/sections",
                json={"content": sample_html, "source_format": "html", "index": True},
            )

        assert response.status_code == 502
