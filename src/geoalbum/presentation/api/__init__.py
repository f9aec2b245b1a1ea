"""FastAPI transport for GeoAlbum.

Run with ``uvicorn geoalbum.presentation.api.app:create_app --factory``.
"""

from geoalbum.presentation.api.app import create_app

__all__ = ["create_app"]
