"""Dictionary service combining the entry page and inflection table with caching."""

import asyncio
import dataclasses
import logging
from urllib.parse import quote

from app.config import Settings, settings
from app.services.dictionary.base import (
    DictionaryRecord,
    FetchError,
    InvalidEntryError,
    VerbForm,
    WordNotFoundError,
)
from app.services.dictionary.cache import CacheBackend, TTLCache, cache_key
from app.services.dictionary.http import HttpxPageFetcher, PageFetcher
from app.services.dictionary.oxford import parse_dictionary_page
from app.services.dictionary.wiktionary import parse_inflection_table

logger = logging.getLogger(__name__)


def normalize_entry(raw: str | None) -> str:
    """Lower-case and trim a requested entry; reject empty ones."""
    entry = (raw or "").lower().strip()
    if not entry:
        raise InvalidEntryError("Invalid entry parameter")
    return entry


class DictionaryService:
    """
    Looks up words on the dictionary site and attaches verb forms.

    The entry page is mandatory: if it cannot be fetched or has no headword
    the lookup fails. The inflection page is best-effort and degrades to an
    empty verb list. Both results are cached under keys derived from their
    URLs.
    """

    def __init__(
        self,
        fetcher: PageFetcher | None = None,
        cache: CacheBackend | None = None,
        config: Settings | None = None,
        dedupe_inflight: bool | None = None,
    ) -> None:
        """
        Initialize the dictionary service.

        Args:
            fetcher: Page fetcher. Defaults to HttpxPageFetcher()
            cache: Cache backend. Defaults to a TTLCache sized from settings
            config: Settings providing URL templates and cache limits
            dedupe_inflight: Share one upstream fetch between concurrent
                lookups of the same entry. Defaults to the setting.
        """
        self.config = config or settings
        self.fetcher = fetcher or HttpxPageFetcher(
            user_agent=self.config.http_user_agent,
            timeout=self.config.http_timeout_seconds,
        )
        self.cache = cache if cache is not None else TTLCache(
            ttl_seconds=self.config.cache_ttl_seconds,
            max_entries=self.config.cache_max_entries,
        )
        self.dedupe_inflight = (
            self.config.dedupe_inflight if dedupe_inflight is None else dedupe_inflight
        )
        self._inflight: dict[str, asyncio.Task[DictionaryRecord]] = {}

    def dictionary_url(self, entry: str) -> str:
        return self.config.dictionary_url(quote(entry, safe=""))

    def inflection_url(self, entry: str) -> str:
        return self.config.inflection_url(quote(entry, safe=""))

    async def lookup(self, entry: str) -> DictionaryRecord:
        """
        Return the dictionary record for an already normalized entry.

        Raises:
            WordNotFoundError: entry page returned non-200 or has no headword
            FetchError: entry page could not be fetched
        """
        key = cache_key(self.dictionary_url(entry))
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug(f"Cache hit for '{entry}'")
            return cached

        if not self.dedupe_inflight:
            return await self._build_record(entry, key)

        task = self._inflight.get(key)
        if task is None:
            task = asyncio.create_task(self._build_record(entry, key))
            self._inflight[key] = task
            task.add_done_callback(lambda done: self._forget(key, done))
        else:
            logger.debug(f"Joining in-flight lookup for '{entry}'")

        # Shield so one caller going away does not cancel the others
        return await asyncio.shield(task)

    def _forget(self, key: str, task: asyncio.Task[DictionaryRecord]) -> None:
        # Mark the outcome as retrieved; every caller may have been cancelled
        if not task.cancelled():
            task.exception()
        if self._inflight.get(key) is task:
            del self._inflight[key]

    async def _build_record(self, entry: str, key: str) -> DictionaryRecord:
        url = self.dictionary_url(entry)

        # Settle both; a failed inflection fetch must not abort the entry fetch
        page, verbs = await asyncio.gather(
            self.fetcher.fetch(url),
            self.fetch_verbs(entry),
            return_exceptions=True,
        )

        if isinstance(page, FetchError):
            raise page
        if isinstance(page, Exception):
            raise FetchError(url, str(page)) from page
        if isinstance(page, BaseException):
            raise page

        if not page.ok:
            logger.info(f"Dictionary page for '{entry}' returned HTTP {page.status}")
            raise WordNotFoundError()

        record = parse_dictionary_page(page.body, self.config.oxford_base_url)

        if isinstance(verbs, BaseException):
            logger.warning(f"Verb lookup for '{entry}' failed: {verbs}")
            verbs = []

        record = dataclasses.replace(record, verb_forms=tuple(verbs))
        self.cache.set(key, record)
        logger.info(
            f"Looked up '{entry}': {len(record.definitions)} definitions, "
            f"{len(record.verb_forms)} verb forms"
        )
        return record

    async def fetch_verbs(self, entry: str) -> list[VerbForm]:
        """
        Fetch verb forms from the inflection page.

        Never raises: any failure is logged and yields an empty list. Only
        successful results are cached.
        """
        url = self.inflection_url(entry)
        key = cache_key(url)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug(f"Cache hit for verbs of '{entry}'")
            return list(cached)

        try:
            page = await self.fetcher.fetch(url)
            if not page.ok:
                logger.warning(f"Failed to fetch verbs from {url}: HTTP {page.status}")
                return []
            verbs = parse_inflection_table(page.body)
        except Exception as e:
            logger.warning(f"Failed to fetch verbs from {url}: {e}")
            return []

        self.cache.set(key, tuple(verbs))
        return verbs

    async def close(self) -> None:
        """Cancel pending lookups and close the page fetcher."""
        for task in list(self._inflight.values()):
            task.cancel()
        self._inflight.clear()
        await self.fetcher.close()
