from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "SkinMatch"
    debug: bool = False

    skins_api_base: str = "https://bymykel.github.io/CSGO-API/api/en"
    skins_fetch_timeout: float = 30.0

    # One hour. The whole catalog lives under a single cache key.
    catalog_cache_ttl_ms: int = 60 * 60 * 1000

    # Where the game client finds this service
    game_api_url: str = "http://localhost:8000"

    default_skin_count: int = 10
    default_pair_count: int = 8

    # Seed for the shared RNG. None means OS entropy.
    random_seed: int | None = None


settings = Settings()


# =============================================================================
# CATALOG CONSTANTS
# =============================================================================

# Single logical cache slot holding the full catalog
ALL_SKINS_CACHE_KEY = "all_skins"

# Label returned in the failure envelope of the catalog endpoint
CATALOG_ERROR_LABEL = "Failed to fetch CS:GO skins"
