"""Create an album at a coordinate for the signed-in user."""

from __future__ import annotations

import logging
from typing import Sequence

from geoalbum.application.dtos import AlbumDTO
from geoalbum.domain.album import Album, AlbumRepository, Coordinate, ImageUrl
from geoalbum.domain.shared.exceptions import DomainException
from geoalbum.domain.shared.result import Err, Ok, Result
from geoalbum.domain.shared.value_objects import UserId

logger = logging.getLogger(__name__)

CONTEXT = "create album"


class CreateAlbumCommand:
    """Validate the input, build the Album and save it."""

    def __init__(self, album_repository: AlbumRepository):
        self._album_repo = album_repository

    async def execute(
        self,
        latitude: float,
        longitude: float,
        image_urls: Sequence[str],
        owner_id: str,
    ) -> Result[AlbumDTO, DomainException]:
        coordinate_result = Coordinate.create(latitude, longitude)
        if isinstance(coordinate_result, Err):
            return Err(coordinate_result.error.with_context(CONTEXT))

        owner_result = UserId.create(owner_id)
        if isinstance(owner_result, Err):
            return Err(owner_result.error.with_context(CONTEXT))

        urls: list[ImageUrl] = []
        for raw in image_urls:
            url_result = ImageUrl.create(raw)
            if isinstance(url_result, Err):
                return Err(url_result.error.with_context(CONTEXT))
            urls.append(url_result.value)

        album_result = Album.create(coordinate_result.value, urls, owner_result.value)
        if isinstance(album_result, Err):
            return Err(album_result.error.with_context(CONTEXT))
        album = album_result.value

        save_result = await self._album_repo.save(album)
        if isinstance(save_result, Err):
            return Err(save_result.error.with_context(CONTEXT))

        logger.info(
            "Album created: %s by %s (%d images)",
            album.id,
            album.owner_id,
            album.image_count,
        )
        return Ok(AlbumDTO.from_album(album))
