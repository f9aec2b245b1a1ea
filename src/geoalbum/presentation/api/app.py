"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from geoalbum.infrastructure.persistence.sqlalchemy import create_tables
from geoalbum.presentation.api.dependencies import get_engine
from geoalbum.presentation.api.exception_handlers import setup_exception_handlers
from geoalbum.presentation.api.routers import albums_router, auth_router
from geoalbum_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging(log_level_name: str) -> None:
    """Configure application logging.

    Sets up logging for the geoalbum packages with:
    - Console output with timestamps and module names
    - Configurable log level for geoalbum modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, log_level_name.upper(), logging.INFO)

    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,
    )

    for name in ("geoalbum", "geoalbum_auth", "geoalbum_identity"):
        logging.getLogger(name).setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Sign in with GitHub.

**Flow:**
1. `GET /auth/github/url` returns the GitHub consent URL and a `state`
2. GitHub redirects back with a `code`
3. `POST /auth/github/callback` exchanges it for a session token

Send the token as `Authorization: Bearer <token>`.
""",
    },
    {
        "name": "Albums",
        "description": """Photo albums pinned to a point on the map.

- An album holds 1 to 10 distinct image URLs
- Only the owner may add or remove images or delete the album
- The last image cannot be removed; delete the album instead
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    logger.info("Starting %s API v%s...", settings.app_name, API_VERSION)
    engine = get_engine(settings.database_url)

    logger.info("Initializing database schema...")
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None

    yield

    logger.info("Shutting down %s API...", settings.app_name)
    await engine.dispose()
    logger.info("Database connections closed")


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints."""
    v1_router = APIRouter()
    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    v1_router.include_router(albums_router, prefix="/albums", tags=["Albums"])
    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Geo-located photo albums with **GitHub sign-in**.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Liveness plus a database ping.

        Unversioned for load balancer/monitoring compatibility.
        """
        database = "ok"
        try:
            async with get_engine(settings.database_url).connect() as conn:
                await conn.execute(text("SELECT 1"))
        except (SQLAlchemyError, OSError):
            logger.warning("Health check could not reach the database", exc_info=True)
            database = "unavailable"

        return {
            "status": "healthy" if database == "ok" else "degraded",
            "version": API_VERSION,
            "api_versions": ["v1"],
            "database": database,
        }

    return app
