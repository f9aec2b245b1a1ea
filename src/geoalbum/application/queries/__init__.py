"""Queries: read-only use cases."""

from geoalbum.application.queries.album import GetAlbumQuery, ListAlbumsQuery

__all__ = ["GetAlbumQuery", "ListAlbumsQuery"]
