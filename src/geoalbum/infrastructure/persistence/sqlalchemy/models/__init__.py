"""SQLAlchemy models for the album domain."""

from geoalbum.infrastructure.persistence.sqlalchemy.models.album_model import (
    AlbumModel,
)
from geoalbum.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)

__all__ = ["AlbumModel", "Base", "TimestampMixin"]
