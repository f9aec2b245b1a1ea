"""Request/response schemas for the API."""

from geoalbum.presentation.api.schemas.albums import (
    AlbumCreateRequest,
    AlbumImageRequest,
    AlbumResponse,
    CoordinateSchema,
)
from geoalbum.presentation.api.schemas.auth import (
    AuthorizationUrlResponse,
    GitHubCallbackRequest,
    SignInResponse,
    UserResponse,
)

__all__ = [
    "AlbumCreateRequest",
    "AlbumImageRequest",
    "AlbumResponse",
    "AuthorizationUrlResponse",
    "CoordinateSchema",
    "GitHubCallbackRequest",
    "SignInResponse",
    "UserResponse",
]
