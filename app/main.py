"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config import settings
from app.logging_config import setup_logging
from app.routes import dictionary_router
from app.services.dictionary import DictionaryService, TTLCache

__version__ = "0.1.0"

# Configure logging
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    logger.info("Starting dictscrape...")

    # One service (and so one cache and HTTP client) for the whole process
    app.state.dictionary_service = DictionaryService()

    yield

    logger.info("Shutting down dictscrape...")
    await app.state.dictionary_service.close()


app = FastAPI(
    title="dictscrape",
    description="Oxford Learner's Dictionaries scraper with verb forms and caching",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(dictionary_router)


@app.get("/health")
async def health() -> dict[str, object]:
    """Health check endpoint."""
    service: DictionaryService | None = getattr(app.state, "dictionary_service", None)
    cache = service.cache if service is not None else None
    return {
        "status": "healthy",
        "version": __version__,
        "cache_entries": len(cache) if isinstance(cache, TTLCache) else 0,
    }


def run(host: str | None = None, port: int | None = None, reload: bool = False) -> None:
    """Run the application (for use with `dictscrape serve`)."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
    )


if __name__ == "__main__":
    run()
