"""Application settings.

Values are resolved by pydantic-settings, highest priority first:

1. OS environment variables
2. the file named by ``GEOALBUM_ENV_FILE`` (relative to the project root)
3. ``config/.env.dev`` (local development)
4. ``config/.env`` (production / Docker)
5. field defaults
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path

from pydantic import Field, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VAR = "GEOALBUM_ENV_FILE"

_ROOT_MARKERS = ("pyproject.toml", "config")


def _project_root() -> Path:
    here = Path(__file__).resolve().parent
    for candidate in here.parents:
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    # Installed as a wheel inside the container image
    return Path("/app")


def get_config_dir() -> Path:
    return _project_root() / "config"


def env_files() -> tuple[Path, ...]:
    """Existing .env files, lowest priority first.

    pydantic-settings lets later files override earlier ones.
    """
    config_dir = get_config_dir()
    candidates = [config_dir / ".env", config_dir / ".env.dev"]

    explicit = os.environ.get(ENV_FILE_VAR)
    if explicit:
        path = Path(explicit)
        candidates.append(path if path.is_absolute() else _project_root() / path)

    return tuple(path for path in candidates if path.is_file())


class Settings(BaseSettings):
    """GeoAlbum configuration.

    Secrets are ``SecretStr`` so they never show up in reprs or logs.
    """

    model_config = SettingsConfigDict(
        env_file=env_files(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Required secrets
    jwt_secret_key: SecretStr
    postgres_password: SecretStr
    github_client_id: str
    github_client_secret: SecretStr

    app_name: str = "GeoAlbum"

    # PostgreSQL (POSTGRES_*)
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_db: str = "geoalbum"
    # Replaces the PostgreSQL URL, e.g. sqlite+aiosqlite:///./data/geoalbum.db
    database_url_override: str | None = None

    # HTTP API (API_*)
    api_debug: bool = False
    api_cors_origins: str = ""

    # Session tokens (JWT_*)
    jwt_issuer: str = "geoalbum"
    jwt_audience: str = "geoalbum-web"
    jwt_access_token_expire_hours: int = Field(default=24 * 7, gt=0)

    # GitHub OAuth app (GITHUB_*)
    github_redirect_uri: str = "http://localhost:5173/auth/callback"
    github_scope: str = "read:user"
    github_oauth_timeout: float = Field(default=10.0, gt=0)

    log_level: str = "INFO"

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_cors_origins(cls, value: object) -> str:
        if isinstance(value, (list, tuple)):
            return ",".join(str(v) for v in value)
        return str(value) if value else ""

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            msg = f"Unknown log level: {value}"
            raise ValueError(msg)
        return level

    @computed_field  # type: ignore[prop-decorator]
    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        password = self.postgres_password.get_secret_value()
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Load settings once per process; missing secrets fail here."""
    return Settings()  # type: ignore[call-arg]


def clear_settings_cache() -> None:
    get_settings.cache_clear()
