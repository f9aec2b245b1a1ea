"""Tests for Settings parsing and derived values."""

import pytest
from pydantic import SecretStr
from pydantic import ValidationError as PydanticValidationError

from geoalbum_config.settings import Settings


def make_settings(**overrides) -> Settings:
    values = {
        "jwt_secret_key": SecretStr("secret"),
        "postgres_password": SecretStr("pg-pass"),
        "github_client_id": "client-id",
        "github_client_secret": SecretStr("client-secret"),
    }
    values.update(overrides)
    return Settings(**values)


class TestDatabaseUrl:
    def test_built_from_postgres_fields(self):
        settings = make_settings(
            postgres_host="db",
            postgres_port=5433,
            postgres_user="geo",
            postgres_db="albums",
            database_url_override=None,
        )

        assert settings.database_url == "postgresql+asyncpg://geo:pg-pass@db:5433/albums"

    def test_override_wins(self):
        settings = make_settings(database_url_override="sqlite+aiosqlite:///:memory:")

        assert settings.database_url == "sqlite+aiosqlite:///:memory:"


class TestCorsOrigins:
    def test_comma_separated(self):
        settings = make_settings(api_cors_origins=" http://a.test, ,http://b.test ")

        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_list_input(self):
        settings = make_settings(api_cors_origins=["http://a.test", "http://b.test"])

        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_empty_means_none(self):
        assert make_settings(api_cors_origins="").cors_origins == []


class TestValidation:
    def test_log_level_is_normalized(self):
        assert make_settings(log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(PydanticValidationError):
            make_settings(log_level="chatty")

    def test_token_lifetime_must_be_positive(self):
        with pytest.raises(PydanticValidationError):
            make_settings(jwt_access_token_expire_hours=0)

    def test_secrets_are_masked(self):
        settings = make_settings()

        assert "secret" not in repr(settings.jwt_secret_key)
        assert settings.jwt_secret_key.get_secret_value() == "secret"


class TestGitHubDefaults:
    def test_scope_only_reads_public_profile(self):
        assert make_settings().github_scope == "read:user"
