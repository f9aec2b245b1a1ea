"""FastAPI dependency injection for the GeoAlbum API.

Provides dependencies for:
- Database sessions
- Authentication (current user from the session token)
- Repository and service instances
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from geoalbum.domain.album import AlbumRepository
from geoalbum.infrastructure.persistence.sqlalchemy import (
    AlbumRepositorySQLAlchemy,
    enable_sqlite_foreign_keys,
)
from geoalbum.presentation.api.config import get_api_settings
from geoalbum_auth import GitHubOAuthProvider, JWTService, OAuthProvider
from geoalbum_config.settings import Settings
from geoalbum_identity.application.queries import GetCurrentUserQuery
from geoalbum_identity.application.services import AuthenticationService
from geoalbum_identity.domain.user import User, UserRepository
from geoalbum_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Database Engine & Session
# -----------------------------------------------------------------------------


@lru_cache(maxsize=4)
def get_engine(database_url: str) -> AsyncEngine:
    """
    Get the shared async database engine for a URL.

    The engine manages the connection pool and is reused across requests.

    Returns
    -------
    AsyncEngine instance
    """
    # Ensure data directory exists for SQLite files
    if database_url.startswith("sqlite") and ":memory:" not in database_url:
        db_path = database_url.split("///")[-1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    engine = create_async_engine(
        database_url,
        echo=False,
        pool_pre_ping=True,
    )
    enable_sqlite_foreign_keys(engine)
    return engine


@lru_cache(maxsize=4)
def get_session_maker(database_url: str) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        get_engine(database_url),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session(
    settings: SettingsDep,
) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    One session per request; routers commit only after a use case succeeded,
    otherwise the session closes and its changes are rolled back.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker(settings.database_url)() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Repositories
# -----------------------------------------------------------------------------


def get_album_repository(session: DBSession) -> AlbumRepository:
    return AlbumRepositorySQLAlchemy(session)


def get_user_repository(session: DBSession) -> UserRepository:
    return UserRepositorySQLAlchemy(session)


AlbumRepo = Annotated[AlbumRepository, Depends(get_album_repository)]
UserRepo = Annotated[UserRepository, Depends(get_user_repository)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


def get_jwt_service(settings: SettingsDep) -> JWTService:
    """Get JWT service configured with API settings."""
    return JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        expire_hours=settings.jwt_access_token_expire_hours,
        issuer=settings.jwt_issuer,
        audience=settings.jwt_audience,
    )


async def get_oauth_provider(
    settings: SettingsDep,
) -> AsyncGenerator[OAuthProvider, None]:
    """GitHub OAuth provider; its HTTP client is closed after the request."""
    provider = GitHubOAuthProvider(
        client_id=settings.github_client_id,
        client_secret=settings.github_client_secret.get_secret_value(),
        redirect_uri=settings.github_redirect_uri,
        scope=settings.github_scope,
        timeout=settings.github_oauth_timeout,
    )
    try:
        yield provider
    finally:
        await provider.close()


JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]


def get_authentication_service(
    user_repository: UserRepo,
    jwt_service: JWTServiceDep,
    oauth_provider: OAuthProvider = Depends(get_oauth_provider),
) -> AuthenticationService:
    """
    Get authentication service with all dependencies.

    This service orchestrates GitHub sign-in and session tokens.
    """
    return AuthenticationService(
        user_repository=user_repository,
        oauth_provider=oauth_provider,
        jwt_service=jwt_service,
    )


# Type alias for injected auth service
AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Current User (JWT Authentication)
# -----------------------------------------------------------------------------


async def get_current_user(
    user_repository: UserRepo,
    jwt_service: JWTServiceDep,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> User:
    """
    FastAPI dependency to get the current authenticated user.

    Parameters
    ----------
    user_repository
        Repository used to load the user
    jwt_service
        JWT service for token verification
    credentials
        Bearer token from Authorization header

    Returns
    -------
    The authenticated User

    Raises
    ------
    HTTPException
        401 if the token is missing
    InvalidTokenError
        if the token is invalid, expired, or its user no longer exists
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    query = GetCurrentUserQuery(user_repository, jwt_service)
    result = await query.execute(credentials.credentials)
    return result.unwrap()


# Type alias for injected current user
CurrentUser = Annotated[User, Depends(get_current_user)]
