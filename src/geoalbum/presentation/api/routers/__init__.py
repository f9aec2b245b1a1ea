"""API routers."""

from geoalbum.presentation.api.routers.albums import router as albums_router
from geoalbum.presentation.api.routers.auth import router as auth_router

__all__ = ["albums_router", "auth_router"]
