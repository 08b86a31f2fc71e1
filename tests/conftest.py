"""Root pytest configuration and shared fixtures.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (mocks, no database)
    │   ├── passgate_auth/ # Hashing and token services
    │   ├── application/   # AuthService with mocked capabilities
    │   ├── config/        # Settings
    │   └── presentation/  # CLI
    └── integration/       # In-memory SQLite (aiosqlite) and the HTTP API
        ├── persistence/
        └── api/

Settings are pointed at an in-memory database before any passgate module
is imported, so importing the API module never touches the filesystem.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENV", "local")

import pytest
import pytest_asyncio

from passgate.infrastructure.persistence.sqlalchemy import (
    SQLAlchemyStorage,
    build_engine,
    build_session_maker,
    create_schema,
)
from passgate_auth import PasswordHashingService
from passgate_config import clear_settings_cache

MEMORY_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

TEST_APP_ID = 1
TEST_APP_NAME = "test-app"
TEST_APP_SECRET = "test-secret"  # NOQA: S105


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Start and finish the session with freshly loaded settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def password_service() -> PasswordHashingService:
    """Real hashing service with low rounds for fast tests."""
    return PasswordHashingService(rounds=4)


@pytest_asyncio.fixture
async def async_engine():
    """Fresh in-memory database with the schema created."""
    engine = build_engine(MEMORY_DATABASE_URL)
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def storage(async_engine) -> SQLAlchemyStorage:
    return SQLAlchemyStorage(build_session_maker(async_engine))


@pytest_asyncio.fixture
async def test_app(storage):
    """The application every integration test logs in to."""
    return await storage.save_app(TEST_APP_NAME, TEST_APP_SECRET, app_id=TEST_APP_ID)
