"""GeoAlbum - geo-located photo albums pinned on a map."""
