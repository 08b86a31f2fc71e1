"""FastAPI dependency injection for the Passgate API.

Provides dependencies for:
- Settings
- Database engine and session factory (process singletons)
- Storage, hashing and token services
- The AuthService wired from all of the above
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from passgate.application.services import AuthService
from passgate.infrastructure.persistence.sqlalchemy import (
    SQLAlchemyStorage,
    build_engine,
    build_session_maker,
)
from passgate_auth import PasswordHashingService, TokenService
from passgate_config.settings import Settings, get_settings


def get_api_settings() -> Settings:
    """Get settings from centralized configuration."""
    return get_settings()


# -----------------------------------------------------------------------------
# Database Engine & Session (one per database URL)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=4)
def get_engine(database_url: str) -> AsyncEngine:
    """
    Get the shared async database engine for a database URL.

    The engine manages the connection pool and is reused across all requests
    of every app configured with the same URL.

    Parameters
    ----------
    database_url
        The ``database_url`` of the app's settings

    Returns
    -------
    AsyncEngine instance
    """
    return build_engine(database_url)


@lru_cache(maxsize=4)
def get_session_maker(database_url: str) -> async_sessionmaker[AsyncSession]:
    return build_session_maker(get_engine(database_url))


@lru_cache(maxsize=4)
def get_storage(database_url: str) -> SQLAlchemyStorage:
    return SQLAlchemyStorage(get_session_maker(database_url))


# -----------------------------------------------------------------------------
# Services
# -----------------------------------------------------------------------------


@lru_cache(maxsize=4)
def get_password_service(rounds: int) -> PasswordHashingService:
    return PasswordHashingService(rounds=rounds)


@lru_cache(maxsize=1)
def get_token_service() -> TokenService:
    return TokenService()


def get_auth_service(
    settings: Annotated[Settings, Depends(get_api_settings)],
) -> AuthService:
    """
    Build the AuthService for a request from the app's settings.

    The service is stateless; only the storage and engine behind it are
    shared between requests.
    """
    storage = get_storage(settings.database_url)
    return AuthService(
        user_saver=storage,
        user_provider=storage,
        app_provider=storage,
        password_service=get_password_service(settings.bcrypt_rounds),
        token_service=get_token_service(),
        token_ttl=settings.token_ttl,
    )


def clear_dependency_caches() -> None:
    """Drop cached singletons (useful for tests and CLI commands)."""
    get_storage.cache_clear()
    get_session_maker.cache_clear()
    get_engine.cache_clear()
    get_password_service.cache_clear()
    get_token_service.cache_clear()


# Type aliases for dependencies using Annotated
SettingsDep = Annotated[Settings, Depends(get_api_settings)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
