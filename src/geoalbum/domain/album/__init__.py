"""Album domain.

This domain handles:
- Album aggregate (coordinate, 1..10 distinct image URLs, owner)
- Ownership rule: only the owner mutates or deletes an album
- Coordinate and ImageUrl value objects
"""

from geoalbum.domain.album.aggregates import MAX_IMAGES, MIN_IMAGES, Album
from geoalbum.domain.album.exceptions import (
    AlbumNotFoundError,
    CoordinateOutOfBoundsError,
    InvalidImageUrlError,
)
from geoalbum.domain.album.repositories import AlbumRepository
from geoalbum.domain.album.value_objects import Coordinate, ImageUrl

__all__ = [
    "MAX_IMAGES",
    "MIN_IMAGES",
    "Album",
    "AlbumNotFoundError",
    "AlbumRepository",
    "Coordinate",
    "CoordinateOutOfBoundsError",
    "ImageUrl",
    "InvalidImageUrlError",
]
