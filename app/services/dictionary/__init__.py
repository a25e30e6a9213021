"""Dictionary lookups scraped from Oxford Learner's Dictionaries and Wiktionary."""

from app.services.dictionary.base import (
    Definition,
    DictionaryError,
    DictionaryRecord,
    Example,
    FetchError,
    InvalidEntryError,
    Pronunciation,
    VerbForm,
    WordNotFoundError,
)
from app.services.dictionary.cache import CacheBackend, TTLCache, cache_key
from app.services.dictionary.http import FetchResponse, HttpxPageFetcher, PageFetcher
from app.services.dictionary.service import DictionaryService, normalize_entry

__all__ = [
    "CacheBackend",
    "Definition",
    "DictionaryError",
    "DictionaryRecord",
    "DictionaryService",
    "Example",
    "FetchError",
    "FetchResponse",
    "HttpxPageFetcher",
    "InvalidEntryError",
    "PageFetcher",
    "Pronunciation",
    "TTLCache",
    "VerbForm",
    "WordNotFoundError",
    "cache_key",
    "normalize_entry",
]
