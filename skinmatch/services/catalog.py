"""
Catalog service.

Serves the full skins catalog from the cache while it is fresh, and
refetches it from upstream once the TTL has passed.
"""

import asyncio
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Protocol

from skinmatch.clients.skins_api import get_skins_client
from skinmatch.config import ALL_SKINS_CACHE_KEY
from skinmatch.models.skin import Skin
from skinmatch.services.catalog_cache import CacheEntry, CatalogCache, get_catalog_cache

logger = logging.getLogger(__name__)


class SkinsFetcher(Protocol):
    """Anything that can download the full catalog."""

    async def fetch_all(self) -> list[Skin]: ...


@dataclass(frozen=True, slots=True)
class CatalogSnapshot:
    """
    The catalog as served for one request.

    Attributes:
        skins: Every skin in the catalog
        timestamp: Epoch-ms time the catalog was stored in the cache
        cached: True if served from a valid entry, False if just fetched
    """

    skins: list[Skin]
    timestamp: int
    cached: bool


class CatalogService:
    """
    Cache-or-fetch access to the skins catalog.

    Concurrent misses are coalesced: only one refresh runs at a time, and a
    caller that waited on it re-reads the cache before fetching again.
    A failed fetch leaves whatever entry was cached untouched.
    """

    def __init__(
        self,
        fetcher: SkinsFetcher,
        cache: CatalogCache,
        cache_key: str = ALL_SKINS_CACHE_KEY,
    ) -> None:
        self.fetcher = fetcher
        self.cache = cache
        self.cache_key = cache_key
        self._refresh_lock = asyncio.Lock()

    def _valid_entry(self) -> CacheEntry | None:
        entry = self.cache.get(self.cache_key)
        if entry is not None and self.cache.is_valid(entry):
            return entry
        return None

    async def get_snapshot(self) -> CatalogSnapshot:
        """
        Get the catalog along with its cache metadata.

        Raises:
            TransportError: If upstream cannot be reached or returns non-2xx
            ParseError: If upstream returns an unusable body
        """
        entry = self._valid_entry()
        if entry is not None:
            logger.debug("CATALOG_CACHE_HIT", extra={"key": self.cache_key})
            return CatalogSnapshot(skins=entry.value, timestamp=entry.timestamp, cached=True)

        async with self._refresh_lock:
            # Another request may have refreshed while we waited
            entry = self._valid_entry()
            if entry is not None:
                return CatalogSnapshot(skins=entry.value, timestamp=entry.timestamp, cached=True)

            logger.info("CATALOG_CACHE_MISS", extra={"key": self.cache_key})
            skins = await self.fetcher.fetch_all()
            entry = self.cache.set(self.cache_key, skins)

        return CatalogSnapshot(skins=skins, timestamp=entry.timestamp, cached=False)

    async def get_catalog(self) -> list[Skin]:
        """Get the full catalog, fetching it if the cache is empty or stale."""
        snapshot = await self.get_snapshot()
        return snapshot.skins


@lru_cache(maxsize=1)
def get_catalog_service() -> CatalogService:
    """
    Get the process-wide catalog service.

    Bound to the shared catalog cache so the admin endpoint sees what this
    service stores, and so every request shares one refresh lock.
    """
    return CatalogService(fetcher=get_skins_client(), cache=get_catalog_cache())
