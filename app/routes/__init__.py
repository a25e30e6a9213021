"""Route handlers for dictscrape."""

from app.routes.dictionary import router as dictionary_router

__all__ = ["dictionary_router"]
