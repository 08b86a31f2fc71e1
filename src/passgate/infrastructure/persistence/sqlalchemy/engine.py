"""Engine and session factories."""

import logging
from pathlib import Path

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from passgate.infrastructure.persistence.sqlalchemy.base import Base

logger = logging.getLogger(__name__)


def build_engine(database_url: str) -> AsyncEngine:
    """
    Create an async engine for the given URL.

    For file-based SQLite the parent directory is created. In-memory SQLite
    uses a single shared connection so every session sees the same database.

    Parameters
    ----------
    database_url
        SQLAlchemy URL with an async driver, e.g. ``sqlite+aiosqlite:///./x.db``

    Returns
    -------
    AsyncEngine instance
    """
    url = make_url(database_url)

    if url.get_backend_name() == "sqlite":
        database = url.database or ""
        if database in ("", ":memory:"):
            return create_async_engine(
                database_url,
                echo=False,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        Path(database).parent.mkdir(parents=True, exist_ok=True)
        return create_async_engine(database_url, echo=False)

    return create_async_engine(
        database_url,
        echo=False,
        pool_pre_ping=True,  # Verify connections before use
    )


def build_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create all tables that do not exist yet."""
    logger.info("Initializing database schema...")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema initialized successfully")
