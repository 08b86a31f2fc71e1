"""Fixtures for API integration tests.

The app is driven in-process through httpx's ASGI transport, so requests run
on the test's event loop against the in-memory database of the ``storage``
fixture. The lifespan does not run; the schema is created by the fixture.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from passgate.application.services import AuthService
from passgate.presentation.api.app import create_app
from passgate.presentation.api.dependencies import get_auth_service
from passgate_auth import TokenService
from passgate_config import Settings


@pytest.fixture
def api_settings() -> Settings:
    return Settings(_env_file=None, env="local")


@pytest.fixture
def auth_service(storage, password_service, api_settings) -> AuthService:
    return AuthService(
        user_saver=storage,
        user_provider=storage,
        app_provider=storage,
        password_service=password_service,
        token_service=TokenService(),
        token_ttl=api_settings.token_ttl,
    )


@pytest.fixture
def api_app(api_settings, auth_service):
    app = create_app(api_settings)
    app.dependency_overrides[get_auth_service] = lambda: auth_service
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(api_app, test_app):
    """HTTP client for an app with the test application provisioned."""
    async with AsyncClient(
        transport=ASGITransport(app=api_app),
        base_url="http://test",
    ) as ac:
        yield ac
