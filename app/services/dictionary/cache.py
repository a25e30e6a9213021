"""In-process TTL cache for parsed dictionary pages."""

import logging
import re
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol

logger = logging.getLogger(__name__)

_UNSAFE_KEY_CHARS = re.compile(r"[^a-zA-Z0-9]")


def cache_key(url: str) -> str:
    """Derive a cache key from a source URL.

    Every character outside ``[A-Za-z0-9]`` becomes ``_``, so URLs that only
    differ in punctuation share a key.
    """
    return f"cache_{_UNSAFE_KEY_CHARS.sub('_', url)}"


class CacheBackend(Protocol):
    """Storage used by DictionaryService; swap for an external store or a mock."""

    def get(self, key: str) -> Any | None: ...

    def set(self, key: str, payload: Any) -> None: ...

    def sweep(self) -> int: ...


@dataclass
class _CacheEntry:
    payload: Any
    stored_at: float


class TTLCache:
    """Map of key to payload where entries expire after a fixed age.

    Expired entries are dropped when read. Entries that are never read again
    are only removed by ``sweep()``, which runs when a write pushes the cache
    past ``max_entries``. This is not LRU eviction: if every entry is still
    fresh the cache simply grows.
    """

    DEFAULT_TTL_SECONDS = 30 * 60
    DEFAULT_MAX_ENTRIES = 1000

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        max_entries: int = DEFAULT_MAX_ENTRIES,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._clock = clock
        self._entries: dict[str, _CacheEntry] = {}
        # get/set are read-then-write; guard them for callers on other threads
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: str) -> Any | None:
        """Return the cached payload, or None if missing or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and self._clock() - entry.stored_at < self.ttl_seconds:
                return entry.payload
            self._entries.pop(key, None)
            return None

    def set(self, key: str, payload: Any) -> None:
        """Store a payload, sweeping expired entries if the cache grew too large."""
        with self._lock:
            self._entries[key] = _CacheEntry(payload=payload, stored_at=self._clock())
            oversized = len(self._entries) > self.max_entries

        if oversized:
            removed = self.sweep()
            logger.debug(f"Cache exceeded {self.max_entries} entries, swept {removed}")

    def sweep(self) -> int:
        """
        Remove every entry older than the TTL.

        Returns the number of entries deleted.
        """
        with self._lock:
            now = self._clock()
            expired = [
                key
                for key, entry in self._entries.items()
                if now - entry.stored_at > self.ttl_seconds
            ]
            for key in expired:
                del self._entries[key]
            return len(expired)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
