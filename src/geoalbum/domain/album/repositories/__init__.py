from geoalbum.domain.album.repositories.album_repository import AlbumRepository

__all__ = ["AlbumRepository"]
