import random
from collections.abc import AsyncGenerator, Callable
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from skinmatch.main import app
from skinmatch.models.failure import TransportError
from skinmatch.models.skin import Skin
from skinmatch.services.catalog import CatalogService, get_catalog_service
from skinmatch.services.catalog_cache import CatalogCache, get_catalog_cache
from skinmatch.services.sampler import get_rng

START_MS = 1_700_000_000_000
ONE_HOUR_MS = 3_600_000


def skin_payload(
    skin_id: str,
    weapon_id: str,
    image: str | None = "auto",
    **overrides: Any,
) -> dict[str, Any]:
    """Raw catalog record shaped like the upstream skins.json entries."""
    if image == "auto":
        image = f"https://cdn.example.com/{skin_id}.png"
    payload: dict[str, Any] = {
        "id": skin_id,
        "name": f"{weapon_id} | {skin_id}",
        "description": "A test skin.",
        "weapon": {"id": weapon_id, "weapon_id": 7, "name": weapon_id.title()},
        "category": {"id": "csgo_inventory_weapon_category_rifles", "name": "Rifles"},
        "pattern": {"id": "cu_test", "name": "Test Pattern"},
        "min_float": 0.0,
        "max_float": 0.8,
        "rarity": {"id": "rarity_rare_weapon", "name": "Mil-Spec Grade", "color": "#4b69ff"},
        "stattrak": True,
        "souvenir": False,
        "paint_index": "12",
        "image": image,
        "team": {"id": "both", "name": "Both Teams"},
        "crates": [
            {"id": "crate-1", "name": "Test Case", "image": "https://cdn.example.com/c.png"}
        ],
        "collections": [],
    }
    payload.update(overrides)
    return payload


def make_skin(skin_id: str, weapon_id: str, image: str | None = "auto", **overrides: Any) -> Skin:
    return Skin.model_validate(skin_payload(skin_id, weapon_id, image=image, **overrides))


class FakeClock:
    """Manually advanced epoch-ms clock."""

    def __init__(self, now: int = START_MS) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


class FakeFetcher:
    """Stands in for SkinsCatalogClient; counts calls."""

    def __init__(self, skins: list[Skin] | None = None, error: Exception | None = None) -> None:
        self.skins = skins or []
        self.error = error
        self.calls = 0

    async def fetch_all(self) -> list[Skin]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.skins)


@pytest.fixture
def skin_factory() -> Callable[..., Skin]:
    return make_skin


@pytest.fixture
def catalog() -> list[Skin]:
    """Six weapons, two skins each, plus one skin with no image."""
    weapons = (
        "weapon_ak47",
        "weapon_awp",
        "weapon_m4a1",
        "weapon_deagle",
        "weapon_glock",
        "weapon_usp",
    )
    skins = [make_skin(f"skin-{weapon}-{n}", weapon) for weapon in weapons for n in (1, 2)]
    skins.append(make_skin("skin-broken", "weapon_p90", image=""))
    return skins


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> CatalogCache:
    return CatalogCache(ttl_ms=ONE_HOUR_MS, clock=clock)


@pytest.fixture
def fetcher(catalog: list[Skin]) -> FakeFetcher:
    return FakeFetcher(skins=catalog)


@pytest.fixture
def service(fetcher: FakeFetcher, cache: CatalogCache) -> CatalogService:
    return CatalogService(fetcher=fetcher, cache=cache)


@pytest.fixture
def failing_fetcher() -> FakeFetcher:
    return FakeFetcher(error=TransportError("HTTP error! status: 500", status=500))


@pytest.fixture
async def client(
    service: CatalogService,
    cache: CatalogCache,
) -> AsyncGenerator[AsyncClient, None]:
    """Async test client wired to a fresh cache, fake fetcher and seeded RNG."""
    app.dependency_overrides[get_catalog_service] = lambda: service
    app.dependency_overrides[get_catalog_cache] = lambda: cache
    app.dependency_overrides[get_rng] = lambda: random.Random(1234)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def fetcher_factory() -> type[FakeFetcher]:
    return FakeFetcher


@pytest.fixture
def payload_factory() -> Callable[..., dict[str, Any]]:
    return skin_payload
