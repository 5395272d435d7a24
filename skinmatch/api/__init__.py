from skinmatch.api.cache import router as cache_router
from skinmatch.api.health import router as health_router
from skinmatch.api.skins import router as skins_router

__all__ = [
    "cache_router",
    "health_router",
    "skins_router",
]
