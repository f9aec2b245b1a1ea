"""SQLAlchemy repository implementations for the album domain."""

from geoalbum.infrastructure.persistence.sqlalchemy.repositories.album_repository import (  # noqa: E501
    AlbumRepositorySQLAlchemy,
)

__all__ = ["AlbumRepositorySQLAlchemy"]
