"""Smoke test for application startup."""

import pytest
from httpx import AsyncClient


def test_app_imports() -> None:
    """Verify the app can be imported without errors."""
    from skinmatch.main import app

    assert app.title == "SkinMatch"


@pytest.mark.parametrize("path", ["/health", "/api/cache", "/api/csgo-skins"])
async def test_routes_registered(client: AsyncClient, path: str) -> None:
    response = await client.get(path)

    assert response.status_code != 404
