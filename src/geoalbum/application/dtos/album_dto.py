"""DTOs for album commands and queries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from geoalbum.domain.album import Album


@dataclass(frozen=True)
class AlbumDTO:
    """Album as returned to the transport layer."""

    id: str
    latitude: float
    longitude: float
    image_urls: tuple[str, ...]
    owner_id: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_album(cls, album: Album) -> AlbumDTO:
        return cls(
            id=album.id.value,
            latitude=album.coordinate.latitude,
            longitude=album.coordinate.longitude,
            image_urls=tuple(url.value for url in album.image_urls),
            owner_id=album.owner_id.value,
            created_at=album.created_at,
            updated_at=album.updated_at,
        )

