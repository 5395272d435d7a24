"""Tests for the cache admin endpoints."""

import pytest
from httpx import AsyncClient


class TestGetCache:
    async def test_empty_cache(self, client: AsyncClient) -> None:
        response = await client.get("/api/cache")

        assert response.status_code == 200
        assert response.json() == {"success": True, "cache": [], "totalKeys": 0}

    async def test_single_key_after_two_fetches(
        self, client: AsyncClient, cache, clock, catalog
    ) -> None:
        """Refetching under the same key still leaves one entry."""
        await client.get("/api/csgo-skins")
        clock.advance(2 * 3_600_000)
        await client.get("/api/csgo-skins")

        data = (await client.get("/api/cache")).json()

        assert data["success"] is True
        assert data["totalKeys"] == 1
        entry = data["cache"][0]
        assert entry["key"] == "all_skins"
        assert entry["itemCount"] == len(catalog)
        assert entry["timestamp"] == clock.now
        assert entry["ageMinutes"] == 0

    async def test_reports_age(self, client: AsyncClient, clock) -> None:
        await client.get("/api/csgo-skins")
        clock.advance(17 * 60_000 + 59_999)

        entry = (await client.get("/api/cache")).json()["cache"][0]

        assert entry["ageMinutes"] == 17


class TestDeleteCache:
    async def test_clear(self, client: AsyncClient) -> None:
        await client.get("/api/csgo-skins")

        response = await client.delete("/api/cache")

        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Cache cleared successfully"}

    async def test_clear_then_inspect(self, client: AsyncClient) -> None:
        await client.get("/api/csgo-skins")
        await client.delete("/api/cache")

        data = (await client.get("/api/cache")).json()

        assert data["totalKeys"] == 0

    async def test_next_request_refetches(self, client: AsyncClient, fetcher) -> None:
        await client.get("/api/csgo-skins")
        await client.delete("/api/cache")

        data = (await client.get("/api/csgo-skins")).json()

        assert data["cached"] is False
        assert fetcher.calls == 2


class TestOtherMethods:
    @pytest.mark.parametrize("method", ["POST", "PUT", "PATCH"])
    async def test_method_not_allowed(self, client: AsyncClient, method: str) -> None:
        """Unsupported verbs are a transport-level 405, not an envelope."""
        response = await client.request(method, "/api/cache")

        assert response.status_code == 405
        assert response.json() == {"detail": "Method not allowed"}
        assert response.headers["allow"] == "GET, DELETE"

    async def test_method_not_allowed_leaves_cache(self, client: AsyncClient, cache) -> None:
        await client.get("/api/csgo-skins")

        await client.post("/api/cache")

        assert len(cache) == 1
