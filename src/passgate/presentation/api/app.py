"""FastAPI application factory.

Creates and configures the FastAPI application with the auth router and
exception handlers.

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

from passgate import __version__
from passgate.infrastructure.persistence.sqlalchemy import create_schema
from passgate.presentation.api.dependencies import (
    clear_dependency_caches,
    get_api_settings,
    get_engine,
)
from passgate.presentation.api.exception_handlers import setup_exception_handlers
from passgate.presentation.api.routers import auth_router
from passgate_config.settings import Settings, get_settings


@lru_cache(maxsize=4)
def configure_logging(log_level: int) -> None:
    """Configure application logging.

    Sets up logging for the passgate application with:
    - Console output with timestamps and module names
    - The given level for passgate modules
    - WARNING level for noisy third-party libraries
    """
    log_format = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    for name in ("passgate", "passgate_auth", "passgate_config"):
        logging.getLogger(name).setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = __version__
API_V1_PREFIX = "/api/v1"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting Passgate API v%s...", API_VERSION)
    settings: Settings = app.state.settings
    engine = get_engine(settings.database_url)
    try:
        await create_schema(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None
    yield

    logger.info("Shutting down Passgate API...")
    await engine.dispose()
    # A restarted app must not reuse the disposed engine
    clear_dependency_caches()
    logger.info("Database connections closed")


def create_v1_router() -> APIRouter:
    v1_router = APIRouter()
    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
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

    configure_logging(settings.resolved_log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description=(
            "Registers users, verifies credentials and issues access tokens "
            "signed per application."
        ),
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
    )
    # Every dependency and the lifespan read this one settings object
    app.state.settings = settings
    app.dependency_overrides[get_api_settings] = lambda: settings

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """Health check endpoint."""
        return {
            "status": "healthy",
            "version": API_VERSION,
            "api_versions": ["v1"],
        }

    return app


# Application instance for uvicorn
app = create_app()
