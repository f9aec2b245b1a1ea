"""Pytest fixtures for API tests.

Each test gets its own SQLite file; the app's lifespan creates the schema.
"""

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr

from geoalbum.presentation.api.app import API_V1_PREFIX, create_app
from geoalbum.presentation.api.dependencies import get_oauth_provider
from geoalbum_config.settings import Settings
from tests.shared.fixtures.api_client import StubOAuthProvider, sign_in
from tests.shared.fixtures.builders import make_profile


@pytest.fixture
def api_v1_prefix() -> str:
    return API_V1_PREFIX


@pytest.fixture
def api_settings(tmp_path) -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        jwt_secret_key=SecretStr("test-jwt-secret-for-testing-only"),
        postgres_password=SecretStr("test-password"),
        github_client_id="test-client-id",
        github_client_secret=SecretStr("test-client-secret"),
        database_url_override=f"sqlite+aiosqlite:///{tmp_path / 'geoalbum.db'}",
        api_debug=True,
        api_cors_origins="http://localhost:5173",
    )


@pytest.fixture
def oauth_provider() -> StubOAuthProvider:
    return StubOAuthProvider(
        {
            "code-octocat": make_profile(external_id="583231", login="octocat"),
            "code-hubot": make_profile(external_id="9919", login="hubot", name=None),
        }
    )


@pytest.fixture
def test_client(api_settings, oauth_provider):
    """Test client running the app lifespan against a fresh database."""
    app = create_app(settings=api_settings)
    app.dependency_overrides[get_oauth_provider] = lambda: oauth_provider

    with TestClient(app) as client:
        yield client


@pytest.fixture
def octocat(test_client) -> dict:
    """Sign-in response for the first user."""
    return sign_in(test_client, "code-octocat")


@pytest.fixture
def hubot(test_client) -> dict:
    """Sign-in response for a second user."""
    return sign_in(test_client, "code-hubot")
