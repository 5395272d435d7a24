"""
SkinMatch services.

Catalog caching, weapon-diverse sampling and card dealing.
"""

from skinmatch.services.card_pairing import DEFAULT_PAIR_COUNT, build_cards
from skinmatch.services.catalog import (
    CatalogService,
    CatalogSnapshot,
    SkinsFetcher,
    get_catalog_service,
)
from skinmatch.services.catalog_cache import (
    CacheEntry,
    CacheEntryInfo,
    CatalogCache,
    count_items,
    get_catalog_cache,
)
from skinmatch.services.sampler import get_rng, sample_skins

__all__ = [
    "DEFAULT_PAIR_COUNT",
    "CacheEntry",
    "CacheEntryInfo",
    "CatalogCache",
    "CatalogService",
    "CatalogSnapshot",
    "SkinsFetcher",
    "build_cards",
    "count_items",
    "get_catalog_cache",
    "get_catalog_service",
    "get_rng",
    "sample_skins",
]
