import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from skinmatch.api import cache_router, health_router, skins_router
from skinmatch.config import settings
from skinmatch.models.failure import KnownError, MethodNotAllowedError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    logger.info(
        "Starting %s against catalog %s (cache ttl %d ms)",
        settings.app_name,
        settings.skins_api_base,
        settings.catalog_cache_ttl_ms,
    )
    yield


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("skinmatch"),
    debug=settings.debug,
    lifespan=lifespan,
)


@app.exception_handler(KnownError)
async def known_error_handler(_request: Request, exc: KnownError) -> JSONResponse:
    """Surface known errors that escape a route as plain HTTP errors."""
    headers = None
    if isinstance(exc, MethodNotAllowedError):
        headers = {"Allow": ", ".join(exc.allowed)}
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=headers,
    )


app.include_router(cache_router)
app.include_router(health_router)
app.include_router(skins_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Tighten in production
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
