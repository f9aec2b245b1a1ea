from geoalbum.application.dtos.album_dto import AlbumDTO

__all__ = ["AlbumDTO"]
