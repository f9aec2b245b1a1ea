"""Shared value objects."""

from geoalbum.domain.shared.value_objects.identifiers import (
    AlbumId,
    Identifier,
    UserId,
)

__all__ = [
    "AlbumId",
    "Identifier",
    "UserId",
]
