"""
Game client for the SkinMatch API.

Used by game front ends to load skins for a round and to manage the
server's catalog cache. Failures never raise: each call records a message
in `error` and returns an empty result, so callers check `error` instead
of catching exceptions.
"""

import logging
import random
from typing import Any

import httpx
from pydantic import TypeAdapter

from skinmatch.config import settings
from skinmatch.models.card import GameCard
from skinmatch.models.skin import Skin
from skinmatch.services.card_pairing import build_cards

logger = logging.getLogger(__name__)

_SKIN_LIST = TypeAdapter(list[Skin])


class SkinMatchClient:
    """
    Stateful client for one game session.

    Attributes:
        loading: True while a skins request is in flight
        error: Message from the last failed call, None after a success
        skins: Skins from the last successful fetch
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """
        Initialize the game client.

        Args:
            base_url: SkinMatch API base URL. Defaults to settings.game_api_url.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport (e.g. ASGITransport for in-process use)
            rng: Random source for dealing cards
        """
        self.base_url = (base_url or settings.game_api_url).rstrip("/")
        self.timeout = timeout
        self.rng = rng
        self._transport = transport
        self._loading = False
        self._error: str | None = None
        self._skins: list[Skin] = []

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def skins(self) -> tuple[Skin, ...]:
        return tuple(self._skins)

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
        )

    async def fetch_random_skins(self, count: int | None = None) -> list[Skin]:
        """
        Load a weapon-diverse random set of skins.

        Args:
            count: Number of skins wanted. Defaults to settings.default_skin_count.

        Returns:
            The skins, or an empty list on failure (see `error`)
        """
        if count is None:
            count = settings.default_skin_count

        self._loading = True
        self._error = None

        try:
            async with self._client() as client:
                response = await client.get("/api/csgo-skins", params={"count": count})
                response.raise_for_status()
                payload = response.json()

            if not isinstance(payload, dict):
                self._error = "Unexpected response from skins API"
                return []

            if payload.get("success") and payload.get("data") is not None:
                skins = _SKIN_LIST.validate_python(payload["data"])
                self._skins = skins
                return skins

            self._error = payload.get("error") or "Failed to fetch skins"
            return []
        except (httpx.HTTPError, ValueError) as e:
            self._error = str(e) or "Unknown error"
            return []
        finally:
            self._loading = False

    async def clear_cache(self) -> None:
        """Ask the server to drop its catalog cache."""
        try:
            async with self._client() as client:
                response = await client.delete("/api/cache")
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error("Failed to clear cache: %s", e)
            self._error = str(e) or "Failed to clear cache"

    async def get_cache_info(self) -> dict[str, Any] | None:
        """
        Get the server's cache entries.

        Returns:
            The cache info payload, or None on failure
        """
        try:
            async with self._client() as client:
                response = await client.get("/api/cache")
                response.raise_for_status()
                info: dict[str, Any] = response.json()
                return info
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Failed to get cache info: %s", e)
            self._error = str(e) or "Failed to get cache info"
            return None

    def transform_skins_for_game(
        self,
        skins: list[Skin],
        pair_count: int | None = None,
    ) -> list[GameCard]:
        """Deal shuffled card pairs from the first `pair_count` skins."""
        if pair_count is None:
            pair_count = settings.default_pair_count
        return build_cards(skins, pair_count, rng=self.rng)
