"""Value objects for the album domain."""

from geoalbum.domain.album.value_objects.coordinate import Coordinate
from geoalbum.domain.album.value_objects.image_url import ImageUrl

__all__ = [
    "Coordinate",
    "ImageUrl",
]
