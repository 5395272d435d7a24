"""
In-process TTL cache for the skins catalog.

Holds whole values under string keys together with the time they were
written. Expiry is not enforced on read: callers ask `is_valid()` so the
same entry can be reported as stale without being thrown away.

In practice one key is used (the full catalog), so at most one entry is
live at a time. The interface (get/set/clear_all/list_entries) is the seam
for swapping in an external key-value store.
"""

import logging
import time
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from functools import lru_cache
from threading import Lock
from typing import Any

from skinmatch.config import settings

logger = logging.getLogger(__name__)

MS_PER_MINUTE = 60_000

# Field names under which older cache shapes stored the skin list
_ITEM_LIST_FIELDS = ("allSkins", "all_skins", "skins")


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """A cached value and the epoch-ms time it was stored."""

    value: Any
    timestamp: int


@dataclass(frozen=True, slots=True)
class CacheEntryInfo:
    """Introspection view of one cache entry."""

    key: str
    timestamp: int
    item_count: int
    age_minutes: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "timestamp": self.timestamp,
            "itemCount": self.item_count,
            "ageMinutes": self.age_minutes,
        }


def count_items(value: Any) -> int:
    """
    Number of skins held by a cached value.

    Accepts a bare list or a mapping that keeps the list under one of the
    known field names. Anything else counts as zero.
    """
    if isinstance(value, Mapping):
        for name in _ITEM_LIST_FIELDS:
            items = value.get(name)
            if items:
                return len(items)
        return 0
    if isinstance(value, Sequence) and not isinstance(value, str | bytes):
        return len(value)
    return 0


@dataclass
class CatalogCache:
    """
    Thread-safe key -> (value, timestamp) store with a fixed TTL.

    Attributes:
        ttl_ms: Entries younger than this are valid
        clock: Returns the current time in epoch milliseconds
    """

    ttl_ms: int = settings.catalog_cache_ttl_ms
    clock: Callable[[], int] = now_ms

    _entries: dict[str, CacheEntry] = field(default_factory=dict)
    _lock: Lock = field(default_factory=Lock)

    def get(self, key: str) -> CacheEntry | None:
        """Return the entry for key, expired or not, or None."""
        with self._lock:
            return self._entries.get(key)

    def set(self, key: str, value: Any) -> CacheEntry:
        """Store value under key stamped with the current time, replacing any entry."""
        entry = CacheEntry(value=value, timestamp=self.clock())
        with self._lock:
            self._entries[key] = entry
        return entry

    def clear_all(self) -> None:
        """Drop every entry."""
        with self._lock:
            removed = len(self._entries)
            self._entries.clear()
        logger.info("CATALOG_CACHE_CLEARED", extra={"removed_keys": removed})

    def is_valid(self, entry: CacheEntry) -> bool:
        """True if the entry is younger than the TTL."""
        return self.clock() - entry.timestamp < self.ttl_ms

    def list_entries(self) -> list[CacheEntryInfo]:
        """Describe every entry with its age and item count."""
        now = self.clock()
        with self._lock:
            snapshot = list(self._entries.items())
        return [
            CacheEntryInfo(
                key=key,
                timestamp=entry.timestamp,
                item_count=count_items(entry.value),
                age_minutes=(now - entry.timestamp) // MS_PER_MINUTE,
            )
            for key, entry in snapshot
        ]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


@lru_cache(maxsize=1)
def get_catalog_cache() -> CatalogCache:
    """
    Get the process-wide catalog cache.

    Shared by the catalog and cache-admin endpoints. Override this
    dependency to give each test its own instance.
    """
    return CatalogCache()
