from geoalbum.domain.album.aggregates.album import MAX_IMAGES, MIN_IMAGES, Album

__all__ = ["Album", "MAX_IMAGES", "MIN_IMAGES"]
