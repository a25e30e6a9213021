"""Services for dictionary scraping and caching."""

from app.services.dictionary import DictionaryService

__all__ = ["DictionaryService"]
