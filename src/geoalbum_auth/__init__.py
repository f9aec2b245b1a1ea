"""GeoAlbum Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the album domain. It handles:
- JWT session token creation and verification
- The OAuth authorization-code flow (GitHub)

Architecture:
    geoalbum_auth/
    ├── services/           # Pure logic (JWT)
    ├── oauth/              # Provider interface and GitHub implementation
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from geoalbum_auth import GitHubOAuthProvider, JWTService
"""

from geoalbum_auth.exceptions import (
    AuthError,
    InvalidTokenError,
    OAuthError,
    TokenError,
)
from geoalbum_auth.oauth import GitHubOAuthProvider, OAuthProvider
from geoalbum_auth.schemas import OAuthProfile, TokenPayload
from geoalbum_auth.services import JWTService

__all__ = [
    # Services
    "JWTService",
    # OAuth
    "GitHubOAuthProvider",
    "OAuthProvider",
    # Schemas
    "OAuthProfile",
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "OAuthError",
    "TokenError",
]
