from skinmatch.clients.game_client import SkinMatchClient
from skinmatch.clients.skins_api import SkinsCatalogClient, get_skins_client, parse_skins

__all__ = [
    "SkinMatchClient",
    "SkinsCatalogClient",
    "get_skins_client",
    "parse_skins",
]
