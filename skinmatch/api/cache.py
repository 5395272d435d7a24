"""
Cache admin endpoints.

Inspect or clear the catalog cache. Unsupported verbs are refused with a
plain HTTP 405 rather than an envelope.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field

from skinmatch.models.failure import MethodNotAllowedError
from skinmatch.services.catalog_cache import CatalogCache, get_catalog_cache

router = APIRouter(prefix="/api", tags=["cache"])

ALLOWED_METHODS = ("GET", "DELETE")


class CacheEntryResponse(BaseModel):
    """One cache entry as reported to admins."""

    key: str
    timestamp: int
    itemCount: int
    ageMinutes: int


class CacheInfoResponse(BaseModel):
    """Response model for cache inspection."""

    success: bool = True
    cache: list[CacheEntryResponse] = Field(default_factory=list)
    totalKeys: int = 0


class CacheClearResponse(BaseModel):
    """Response model for cache clearing."""

    success: bool = True
    message: str


@router.get("/cache", response_model=CacheInfoResponse)
async def get_cache_info(
    cache: Annotated[CatalogCache, Depends(get_catalog_cache)],
) -> CacheInfoResponse:
    """
    List cache entries.

    Reports each entry's age in whole minutes and how many skins it holds.
    """
    entries = cache.list_entries()
    return CacheInfoResponse(
        cache=[CacheEntryResponse(**info.to_dict()) for info in entries],
        totalKeys=len(entries),
    )


@router.delete("/cache", response_model=CacheClearResponse)
async def clear_cache(
    cache: Annotated[CatalogCache, Depends(get_catalog_cache)],
) -> CacheClearResponse:
    """Drop every cache entry. The next catalog request refetches upstream."""
    cache.clear_all()
    return CacheClearResponse(message="Cache cleared successfully")


@router.api_route("/cache", methods=["POST", "PUT", "PATCH"], include_in_schema=False)
async def cache_method_not_allowed(request: Request) -> None:
    raise MethodNotAllowedError(request.method, ALLOWED_METHODS)
