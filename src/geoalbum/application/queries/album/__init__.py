"""Album queries."""

from geoalbum.application.queries.album.get_album_query import GetAlbumQuery
from geoalbum.application.queries.album.list_albums_query import ListAlbumsQuery

__all__ = ["GetAlbumQuery", "ListAlbumsQuery"]
