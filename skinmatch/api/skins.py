"""
Skins API endpoint.

Serves a random, weapon-diverse handful of skins for a game round.
Failures are reported inside the response envelope, never as HTTP errors.
"""

import logging
import random
import re
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from skinmatch.config import CATALOG_ERROR_LABEL, settings
from skinmatch.models.failure import KnownError
from skinmatch.models.skin import Skin
from skinmatch.services.catalog import CatalogService, get_catalog_service
from skinmatch.services.sampler import get_rng, sample_skins

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["skins"])

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

# Envelope fields that only one of the success and failure shapes carries
_OPTIONAL_FIELDS = ("data", "cached", "timestamp", "total_available", "error", "message")


class SkinsResponse(BaseModel):
    """Envelope for the random skins endpoint."""

    success: bool
    data: list[Skin] | None = None
    cached: bool | None = None
    timestamp: int | None = None
    total_available: int | None = None
    requested_count: int
    returned_count: int
    error: str | None = None
    message: str | None = None


def parse_count(raw: str | None, default: int) -> int:
    """
    Parse the count query parameter.

    Reads a leading integer the way a lenient form parser would ("12abc" is
    12). Missing or non-numeric input falls back to default.
    """
    if raw is None:
        return default
    match = _LEADING_INT.match(raw)
    if match is None:
        return default
    return int(match.group(1))


@router.get(
    "/csgo-skins",
    response_model=SkinsResponse,
)
async def get_random_skins(
    service: Annotated[CatalogService, Depends(get_catalog_service)],
    rng: Annotated[random.Random, Depends(get_rng)],
    count: Annotated[str | None, Query(description="Number of skins to return")] = None,
) -> JSONResponse:
    """
    Get random skins for a round.

    Picks at most one skin per weapon until weapons run out. Upstream
    failures come back as success=false with HTTP 200.
    """
    requested = parse_count(count, settings.default_skin_count)

    try:
        snapshot = await service.get_snapshot()
    except KnownError as e:
        logger.warning(
            "CATALOG_FETCH_FAILED",
            extra={"kind": e.kind.value, "error": e.message},
        )
        return _failure(requested, e.message)
    except Exception as e:
        logger.exception("Unexpected error loading skins catalog")
        return _failure(requested, str(e) or "Unknown error")

    selected = sample_skins(snapshot.skins, requested, rng=rng)

    return _render(
        SkinsResponse(
            success=True,
            data=selected,
            cached=snapshot.cached,
            timestamp=snapshot.timestamp,
            total_available=len(snapshot.skins),
            requested_count=requested,
            returned_count=len(selected),
        )
    )


def _failure(requested: int, message: str) -> JSONResponse:
    return _render(
        SkinsResponse(
            success=False,
            error=CATALOG_ERROR_LABEL,
            message=message,
            requested_count=requested,
            returned_count=0,
        )
    )


def _render(body: SkinsResponse) -> JSONResponse:
    """
    Serialize the envelope.

    Only unused envelope fields are left out. Skin records keep their null
    fields so they reach the client exactly as the catalog describes them.
    """
    unused = {name for name in _OPTIONAL_FIELDS if getattr(body, name) is None}
    return JSONResponse(content=body.model_dump(mode="json", exclude=unused))
