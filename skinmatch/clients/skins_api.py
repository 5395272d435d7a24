"""
CS:GO skins catalog client.

Downloads the full skins list from the public static CSGO-API mirror.
The upstream file is a plain JSON array; its schema is trusted as-is apart
from the fields modelled on Skin.

Catalog: https://bymykel.github.io/CSGO-API/api/en/skins.json
"""

import json
import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from skinmatch.config import settings
from skinmatch.models.failure import ParseError, TransportError
from skinmatch.models.skin import Skin

logger = logging.getLogger(__name__)

USER_AGENT = "SkinMatch/1.0"

_SKIN_LIST = TypeAdapter(list[Skin])


def parse_skins(payload: bytes | str) -> list[Skin]:
    """
    Parse a catalog body into skins.

    Args:
        payload: Raw response body

    Returns:
        Skins in catalog order

    Raises:
        ParseError: If the body is not JSON or not a list of skin objects
    """
    try:
        data = json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ParseError(f"Invalid JSON in skins catalog: {e}") from e

    if not isinstance(data, list):
        raise ParseError(
            f"Expected a JSON array of skins, got {type(data).__name__}",
        )

    try:
        return _SKIN_LIST.validate_python(data)
    except ValidationError as e:
        raise ParseError(
            f"Skins catalog does not match expected shape ({e.error_count()} errors)",
            detail=str(e),
        ) from e


class SkinsCatalogClient:
    """
    Client for the static skins catalog.

    Performs exactly one GET per fetch_all() call. No retries.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the catalog client.

        Args:
            base_url: Catalog base URL. Defaults to settings.skins_api_base.
            timeout: Request timeout in seconds. Defaults to settings.skins_fetch_timeout.
            client: Optional httpx client for connection reuse
        """
        self.base_url = (base_url or settings.skins_api_base).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.skins_fetch_timeout
        self._client = client

    @property
    def skins_url(self) -> str:
        return f"{self.base_url}/skins.json"

    async def fetch_all(self) -> list[Skin]:
        """
        Download and parse the full skins catalog.

        Returns:
            Every skin in the catalog

        Raises:
            TransportError: If the request fails or returns a non-2xx status
            ParseError: If the body is not a valid skins list
        """
        logger.info("Fetching skins catalog from %s", self.skins_url)

        try:
            if self._client is not None:
                response = await self._client.get(self.skins_url)
            else:
                async with httpx.AsyncClient(
                    timeout=self.timeout,
                    headers={"User-Agent": USER_AGENT},
                    follow_redirects=True,
                ) as client:
                    response = await client.get(self.skins_url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise TransportError(f"HTTP error! status: {status}", status=status) from e
        except httpx.RequestError as e:
            raise TransportError(f"Failed to reach skins catalog: {e!r}") from e

        skins = parse_skins(response.content)
        logger.info("Fetched %d skins", len(skins))
        return skins


def get_skins_client() -> SkinsCatalogClient:
    """Dependency providing a catalog client built from settings."""
    return SkinsCatalogClient()
