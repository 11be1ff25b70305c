"""FastAPI application for the sections API."""

from fastapi import FastAPI

from adoc2sections.utils.logging_config import configure_logging
from server.routers.sections import router as sections_router

configure_logging()

app = FastAPI(title="adoc2sections", description="Flatten AsciiDoc documents into faceted section records")
app.include_router(sections_router)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
